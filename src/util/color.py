"""
どこで: `util.color`。
何を: Hex 色文字列の解析と、アルファ値の付与（"#RRGGBB" + "AA"）。
なぜ: パレット構築/テスト/CLI で同一の受理仕様とエラーメッセージを共有するため。
"""

from __future__ import annotations


def _strip_prefix(s: str) -> str:
    t = s.strip()
    if t.startswith("#"):
        return t[1:]
    if t.lower().startswith("0x"):
        return t[2:]
    return t


def parse_hex_color_str(s: str) -> tuple[float, float, float, float]:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = _strip_prefix(s)
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def alpha_hex(alpha: int) -> str:
    """0–255 のアルファ値を 2 桁の小文字 Hex にする。"""
    a = int(alpha)
    if not 0 <= a <= 255:
        raise ValueError(f"alpha must be in [0, 255]: got {alpha!r}")
    return f"{a:02x}"


def with_alpha(hex_rgb: str, alpha: int) -> str:
    """"#RRGGBB" に 2 桁のアルファを連結して "#RRGGBBAA" を返す。"""
    t = _strip_prefix(hex_rgb)
    if len(t) != 6:
        raise ValueError(f"expected a 6-digit hex color: got '{hex_rgb}'")
    parse_hex_color_str(t)
    return f"#{t.lower()}{alpha_hex(alpha)}"


def alpha_of(hex_rgba: str) -> int:
    """"#RRGGBBAA" のアルファ成分（0–255）を返す。アルファ無しは 255。"""
    return int(round(parse_hex_color_str(hex_rgba)[3] * 255))


__all__ = [
    "parse_hex_color_str",
    "alpha_hex",
    "with_alpha",
    "alpha_of",
]

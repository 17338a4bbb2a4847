"""
どこで: `common` の型定義。
何を: Range エイリアスと、キャンバス境界 `Bounds`。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidBounds

# (min, max) の閉区間指定（skew 帯域、サイズ範囲など）
Range = tuple[float, float]


@dataclass(frozen=True)
class Bounds:
    """キャンバスの寸法。原点は左上、x は右、y は下方向。"""

    width: float
    height: float

    def __post_init__(self) -> None:
        w = float(self.width)
        h = float(self.height)
        if not (w > 0.0 and h > 0.0) or w == float("inf") or h == float("inf"):
            raise InvalidBounds(f"canvas must be positive and finite: got {self.width}x{self.height}")
        object.__setattr__(self, "width", w)
        object.__setattr__(self, "height", h)

    def contains(self, x: float, y: float) -> bool:
        """半開区間 [0, width) x [0, height) に含まれるか。"""
        return 0.0 <= x < self.width and 0.0 <= y < self.height


__all__ = ["Range", "Bounds"]

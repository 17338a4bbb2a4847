"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

キー（接頭辞 `PXG_`）:
- `PXG_HUE_MIN` / `PXG_HUE_MAX`: 基準色相を引く区間 [deg]（既定 50–200）
- `PXG_ALPHA_MIN` / `PXG_ALPHA_MAX`: 各色に付けるアルファの区間（既定 50–200, 上端は含まない）
- `PXG_NOISE_EXTENT`: キャンバス幅をノイズ空間へ写す際の上端（既定 6.0）
- `PXG_USE_NUMBA`: 0 で Perlin カーネルを素の Python として実行
- `PXG_LOG_LEVEL`: CLI が使う既定ログレベル
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int, env_str


@dataclass
class _Settings:
    # パレット
    HUE_MIN: float = 50.0
    HUE_MAX: float = 200.0
    ALPHA_MIN: int = 50
    ALPHA_MAX: int = 200

    # ノイズ
    NOISE_EXTENT: float = 6.0
    USE_NUMBA: bool = True

    # Misc
    LOG_LEVEL: str = "WARNING"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 区間が潰れる/逆転する値は既定値へ戻す。
    """
    _settings.HUE_MIN = env_float("PXG_HUE_MIN", 50.0)
    _settings.HUE_MAX = env_float("PXG_HUE_MAX", 200.0)
    if _settings.HUE_MAX <= _settings.HUE_MIN:
        _settings.HUE_MIN, _settings.HUE_MAX = 50.0, 200.0

    # 上端は含まないので 256 まで（アルファは 1 バイト）
    _settings.ALPHA_MIN = env_int("PXG_ALPHA_MIN", 50, min_value=0, max_value=255)
    _settings.ALPHA_MAX = env_int("PXG_ALPHA_MAX", 200, min_value=1, max_value=256)
    if _settings.ALPHA_MAX <= _settings.ALPHA_MIN:
        _settings.ALPHA_MIN, _settings.ALPHA_MAX = 50, 200

    _settings.NOISE_EXTENT = env_float("PXG_NOISE_EXTENT", 6.0)
    if _settings.NOISE_EXTENT <= 0.0:
        _settings.NOISE_EXTENT = 6.0
    _settings.USE_NUMBA = env_bool("PXG_USE_NUMBA", True)

    _settings.LOG_LEVEL = env_str("PXG_LOG_LEVEL", "WARNING").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]

"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する（エンジン内部は設定しない）。
- CLI など最上位の呼び出し側だけが `setup_default_logging()` を 1 度呼ぶ。
- numba のコンパイラログは DEBUG 時に大量に出るため、別途 WARNING に抑える。
"""

from __future__ import annotations

import logging

from . import settings as _settings

_NOISY_LOGGERS = ("numba",)


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = _settings.get().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `PXG_LOG_LEVEL`（`common.settings`）を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    """
    lvl = _resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))


__all__ = ["setup_default_logging"]

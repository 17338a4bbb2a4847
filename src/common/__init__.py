"""
どこで: `common` パッケージ。
何を: 例外階層・型・設定・レジストリなど、各層から参照される軽量な共通基盤。
なぜ: engine/distributors/palette 間の依存の向きを単純に保つため。
"""

from .base_registry import BaseRegistry
from .errors import GenerationError
from .types import Bounds

__all__ = [
    "BaseRegistry",
    "Bounds",
    "GenerationError",
]

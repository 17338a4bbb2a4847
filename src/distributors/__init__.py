"""
どこで: `distributors` パッケージ（配置戦略の関数登録）。
何を: ビルトイン戦略（uniform / noise）を import 副作用で登録し、生成サービスから名前で解決できるようにする。
なぜ: 配置ロジックの拡張点を一箇所に集約するため。
"""

# 関数版の戦略定義を import して登録（副作用）
from . import noise as _register_noise  # noqa: F401
from . import uniform as _register_uniform  # noqa: F401
from .factory import FixedSize, ScoredSize, Shape, make_shape
from .registry import distributor, get_distributor, is_distributor_registered, list_distributors

__all__ = [
    "distributor",
    "get_distributor",
    "list_distributors",
    "is_distributor_registered",
    "Shape",
    "FixedSize",
    "ScoredSize",
    "make_shape",
]

"""
どこで: `api` 入口（高レベル公開 API）。
何を: 生成関数 `generate` / `generate_from_mapping` と、リクエスト/結果/図形の型、例外を再輸出。
なぜ: 利用者（フロントエンドのブリッジや CLI）が単一名前空間から生成まで完結できるようにするため。

Usage:
    from api import GenerationRequest, generate

    req = GenerationRequest.noise(800, 600, scheme="triade", distance=0.4, step=40, sparsity=0.2)
    result = generate(req, seed=42)
    payload = result.to_dict()   # {"background", "colors", "filters", "scheme", ...}
"""

from __future__ import annotations

from typing import Any, Mapping

from common.errors import (
    DegenerateRange,
    EmptyPalette,
    EmptySequence,
    GenerationError,
    InvalidBounds,
    InvalidCount,
    InvalidRange,
    InvalidRequest,
    InvalidStep,
    InvalidVariation,
)
from distributors import Shape, distributor
from engine.generation import (
    GenerationRequest,
    GenerationResult,
    GenerationService,
    PaletteConfig,
)
from util.random import RandomSource


def generate(request: GenerationRequest, *, seed: int | None = None) -> GenerationResult:
    """リクエスト 1 件を生成する（`seed` 指定で再現可能）。"""
    return GenerationService(RandomSource(seed)).generate(request)


def generate_from_mapping(
    data: Mapping[str, Any],
    *,
    seed: int | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> GenerationResult:
    """フロントエンド形式の辞書から生成する。"""
    return GenerationService(RandomSource(seed)).generate_from_mapping(data, defaults)


__all__ = [
    # メインAPI
    "generate",
    "generate_from_mapping",
    "distributor",  # ユーザー拡張用デコレータ
    # 型
    "GenerationRequest",
    "GenerationResult",
    "GenerationService",
    "PaletteConfig",
    "RandomSource",
    "Shape",
    # 例外
    "GenerationError",
    "EmptyPalette",
    "EmptySequence",
    "InvalidCount",
    "InvalidStep",
    "InvalidBounds",
    "InvalidRange",
    "DegenerateRange",
    "InvalidVariation",
    "InvalidRequest",
]

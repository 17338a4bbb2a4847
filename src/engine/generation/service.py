"""
どこで: `engine.generation.service`。
何を: 1 リクエスト分の生成を組み立てる（検証 → パレット → 配置戦略 → 結果）。
なぜ: 呼び出し側（API/CLI/フロントエンド）に単一の `generate(request)` 境界を提供するため。

注意:
- 設定エラーはすべて乱数を引く前に送出する。途中結果は返さない。
- サービスが持つ状態は乱数源だけ。並列に使う場合はスレッドごとに別インスタンスを用意すること。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from distributors import get_distributor
from util.random import RandomSource
from util.utils import generation_defaults

from .palette_builder import PaletteBuilder
from .request import GenerationRequest
from .result import GenerationResult

logger = logging.getLogger(__name__)


class GenerationService:
    """生成リクエストを処理するサービス。

    Parameters
    ----------
    rng : RandomSource | None
        乱数源。None なら OS エントロピーで初期化した新しい `RandomSource`。
    palette_builder : PaletteBuilder | None
        パレット導出器。None なら既定のパレットライブラリを使う。
    defaults : Mapping[str, Any] | None
        辞書リクエストの欠損値の補完元。None なら構築時に `configs/default.yaml` を 1 度だけ読む。
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        palette_builder: PaletteBuilder | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else RandomSource()
        self._palette_builder = palette_builder or PaletteBuilder()
        self._defaults = dict(generation_defaults() if defaults is None else defaults)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """リクエストを検証し、パレットと図形列を生成して返す。

        Raises
        ------
        GenerationError
            設定エラー（乱数を引く前）または空パレット。
        """
        bounds, params = request.validate()
        distribute = get_distributor(request.strategy)

        built = self._palette_builder.build(request.palette, request.style, self._rng)
        shapes = distribute(bounds, built.colors, rng=self._rng, **params)

        logger.debug(
            "generate: strategy=%s scheme=%s style=%s canvas=%gx%g shapes=%d",
            request.strategy,
            request.palette.scheme_kind.value,
            request.style,
            bounds.width,
            bounds.height,
            len(shapes),
        )
        return GenerationResult(
            background=built.background,
            colors=built.colors,
            shapes=tuple(shapes),
            hue=built.hue,
            request=request.echo(params),
        )

    def generate_from_mapping(
        self, data: Mapping[str, Any], defaults: Mapping[str, Any] | None = None
    ) -> GenerationResult:
        """フロントエンド形式の辞書から生成する（`defaults` 省略時は構築時に読んだ既定値）。"""
        return self.generate(
            GenerationRequest.from_mapping(data, self._defaults if defaults is None else defaults)
        )


__all__ = ["GenerationService"]

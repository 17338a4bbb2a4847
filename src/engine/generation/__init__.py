"""
どこで: `engine.generation`。
何を: 生成リクエスト/結果の型、パレット導出、生成サービスを束ねる。
"""

from .palette_builder import BuiltPalette, PaletteBuilder
from .request import NOISE, UNIFORM, GenerationRequest, PaletteConfig
from .result import GenerationResult
from .service import GenerationService

__all__ = [
    "BuiltPalette",
    "PaletteBuilder",
    "GenerationRequest",
    "PaletteConfig",
    "GenerationResult",
    "GenerationService",
    "UNIFORM",
    "NOISE",
]

"""
どこで: `engine.generation.result`。
何を: 生成結果（背景・色列・図形列・リクエストのエコー）。
なぜ: フロントエンドへ返すペイロードの形（`to_dict`）を 1 箇所に固定するため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from distributors.factory import Shape


@dataclass(frozen=True)
class GenerationResult:
    """リクエストごとに新しく作られる不変の結果。"""

    background: str
    colors: tuple[str, ...]
    shapes: tuple[Shape, ...]
    hue: float
    request: dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.shapes)

    def to_dict(self) -> dict[str, Any]:
        """フロントエンド形式（図形は `filters` キー）。リクエスト内容を同じ階層に展開する。"""
        out: dict[str, Any] = dict(self.request)
        out.update(
            {
                "background": self.background,
                "colors": list(self.colors),
                "filters": [s.to_dict() for s in self.shapes],
                "hue": self.hue,
            }
        )
        return out


__all__ = ["GenerationResult"]

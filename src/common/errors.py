"""
どこで: `common.errors`。
何を: 生成リクエスト 1 件の失敗を表す例外階層。
なぜ: 設定エラー（乱数を引く前に検出）と内部不変条件の違反を呼び出し側が区別できるようにするため。

分類:
- 設定エラー: `InvalidCount` / `InvalidStep` / `InvalidBounds` / `InvalidRange` /
  `DegenerateRange` / `InvalidVariation` / `InvalidRequest`
- 生成時エラー: `EmptyPalette`（パレットが 0 色）
- 内部不変条件: `EmptySequence`（空列からの選択。上流で防がれるべきもの）

いずれも `ValueError` 派生なので、既存の `except ValueError` でも捕捉できる。
"""

from __future__ import annotations


class GenerationError(ValueError):
    """生成リクエストの失敗を表す基底例外。"""


class EmptyPalette(GenerationError):
    """パレットライブラリが 0 色を返した。"""


class EmptySequence(GenerationError):
    """空の列から要素を選ぼうとした。"""


class InvalidCount(GenerationError):
    """図形数が負。"""


class InvalidStep(GenerationError):
    """グリッドの刻み幅が 0 以下。"""


class InvalidBounds(GenerationError):
    """キャンバス寸法が正でない。"""


class InvalidRange(GenerationError):
    """[min, max] ペアの形式または値域が不正。"""


class DegenerateRange(GenerationError):
    """写像元の区間幅が 0（または向きが不正）で線形写像できない。"""


class InvalidVariation(GenerationError):
    """未知のバリエーション名。"""


class InvalidRequest(GenerationError):
    """リクエストの形そのものが不正（未知のスキーム/戦略、型違いなど）。"""


__all__ = [
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

"""
生成 CLI（フロントエンド無しでペイロードを確認する開発用ツール）

リクエストをフラグ、または JSON/YAML ファイルから組み立てて 1 回生成し、
フロントエンドへ送るのと同じ形の辞書を JSON で標準出力へ書き出す。

使い方:
    python -m scripts.generate --width 800 --height 600 --scheme triade --distance 0.5
    python -m scripts.generate --width 800 --height 600 --step 40 --sparsity 0.2 --seed 7
    python -m scripts.generate --request request.yaml --indent 2

- ファイルとフラグの両方を指定した場合はフラグが優先。
- 設定エラーは標準エラーへメッセージを出し、終了コード 2 を返す。
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml

from api import GenerationError, generate_from_mapping
from common.logging import setup_default_logging
from palette import SCHEME_OPTIONS, VARIATION_OPTIONS

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m scripts.generate",
        description="Generate a palette and a set of decorative shapes as JSON.",
    )
    p.add_argument("--request", type=Path, help="JSON/YAML file with a request mapping")
    p.add_argument("--width", type=float)
    p.add_argument("--height", type=float)
    p.add_argument("--scheme", choices=[k.value for _, k in SCHEME_OPTIONS])
    p.add_argument("--distance", type=float)
    p.add_argument("--complement", action="store_true", default=None)
    p.add_argument("--style", choices=[v.value for _, v in VARIATION_OPTIONS])
    p.add_argument("--strategy", help="distributor name (inferred when omitted)")
    p.add_argument("--count", type=int)
    p.add_argument("--step", type=float)
    p.add_argument("--sparsity", type=float)
    p.add_argument("--skew", type=float, nargs=2, metavar=("MIN", "MAX"))
    p.add_argument("--size-range", type=float, nargs=2, metavar=("MIN", "MAX"))
    p.add_argument("--seed", type=int, help="seed for a reproducible result")
    p.add_argument("--indent", type=int, default=None)
    p.add_argument("--log-level", default=None)
    return p


def _load_request_file(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        # YAML は JSON の上位互換なので両方これで読める
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"request file must contain a mapping: {path}")
    return data


def build_request_mapping(args: argparse.Namespace) -> dict[str, Any]:
    """ファイル → フラグの順に重ねてリクエスト辞書を作る。"""
    data: dict[str, Any] = _load_request_file(args.request) if args.request else {}

    scheme = data.get("scheme")
    scheme_map: dict[str, Any] = dict(scheme) if isinstance(scheme, dict) else {}
    if isinstance(scheme, str):
        scheme_map["scheme"] = scheme
    for key, value in (
        ("scheme", args.scheme),
        ("distance", args.distance),
        ("complemented", args.complement),
    ):
        if value is not None:
            scheme_map[key] = value
    if scheme_map:
        data["scheme"] = scheme_map

    for key, value in (
        ("width", args.width),
        ("height", args.height),
        ("style", args.style),
        ("strategy", args.strategy),
        ("count", args.count),
        ("step", args.step),
        ("sparsity", args.sparsity),
        ("skew", args.skew),
        ("sizeRange", args.size_range),
    ):
        if value is not None:
            data[key] = value
    return data


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    try:
        mapping = build_request_mapping(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"error: cannot read request: {exc}", file=sys.stderr)
        return 2

    try:
        result = generate_from_mapping(mapping, seed=args.seed)
    except GenerationError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 2

    logger.info("generated %d shapes", len(result))
    json.dump(result.to_dict(), sys.stdout, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

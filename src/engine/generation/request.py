"""
どこで: `engine.generation.request`。
何を: 生成リクエスト（パレット設定・バリエーション・キャンバス・配置戦略パラメータ）の型と検証。
なぜ: フロントエンドから届く辞書を 1 箇所で正規化し、乱数を 1 つも引く前に設定エラーを弾くため。

受理する辞書（フロントエンドが送る camelCase をそのまま受ける）:

    {
        "scheme": {"scheme": "triade", "distance": 0.5, "complemented": false},
        "style": "pastel",
        "width": 800, "height": 600,
        # uniform
        "count": 20,
        # または noise
        "step": 50, "sparsity": 0.2, "skew": [0.8, 1.2], "sizeRange": [10, 60],
    }

- 戦略は `strategy` キーが優先。無ければ noise 固有キー（step/sparsity/sizeRange）の有無で判定する。
- 欠けた値は `configs/default.yaml` の `generation` セクション（`util.utils.generation_defaults`）で補う。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from common.base_registry import normalize_key
from common.errors import InvalidRange, InvalidRequest, InvalidVariation
from common.types import Bounds
from distributors import get_distributor, is_distributor_registered
from palette import SchemeKind, Variation
from util.utils import generation_defaults

UNIFORM = "uniform"
NOISE = "noise"

# 辞書キー → パラメータ名（camelCase/snake_case の両方を受ける）
_PARAM_ALIASES: dict[str, str] = {
    "count": "count",
    "step": "step",
    "sparsity": "sparsity",
    "skew": "skew",
    "sizeRange": "size_range",
    "size_range": "size_range",
}
_STRATEGY_PARAMS: dict[str, tuple[str, ...]] = {
    UNIFORM: ("count", "skew"),
    NOISE: ("step", "sparsity", "skew", "size_range"),
}
_NOISE_ONLY = ("step", "sparsity", "size_range")


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    raise InvalidRequest(f"{name} must be a boolean: got {value!r}")


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidRequest(f"{name} must be a number: got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRequest(f"{name} must be a number: got {value!r}") from exc


@dataclass(frozen=True)
class PaletteConfig:
    """パレット設定。distance/complemented は対応するスキームでのみ効く。"""

    scheme_kind: SchemeKind = SchemeKind.MONO
    distance: float = 0.0
    complemented: bool = False

    def __post_init__(self) -> None:
        try:
            kind = SchemeKind.from_value(self.scheme_kind)
        except ValueError as exc:
            raise InvalidRequest(str(exc)) from exc
        distance = _as_float(self.distance, "distance")
        if not 0.0 <= distance <= 1.0:
            raise InvalidRange(f"distance must be in [0, 1]: got {self.distance!r}")
        object.__setattr__(self, "scheme_kind", kind)
        object.__setattr__(self, "distance", distance)
        object.__setattr__(self, "complemented", _as_bool(self.complemented, "complemented"))

    @classmethod
    def from_mapping(cls, data: Any, defaults: Mapping[str, Any] | None = None) -> "PaletteConfig":
        """`{"scheme", "distance", "complemented"}` またはスキーム名の文字列から作る。"""
        d = defaults or {}
        if isinstance(data, str):
            data = {"scheme": data}
        elif data is None:
            data = {}
        elif not isinstance(data, Mapping):
            raise InvalidRequest(f"scheme must be a mapping or a name: got {data!r}")
        return cls(
            scheme_kind=_or_default(data.get("scheme"), d.get("scheme", SchemeKind.MONO.value)),
            distance=_or_default(data.get("distance"), d.get("distance", 0.0)),
            complemented=_or_default(data.get("complemented"), d.get("complemented", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "scheme": self.scheme_kind.value,
            "distance": self.distance,
            "complemented": self.complemented,
        }


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


@dataclass(frozen=True)
class GenerationRequest:
    """1 回の生成リクエスト。

    `params` は配置戦略に渡すキーワード引数（未検証）。検証は `validate()` で行う。
    """

    palette: PaletteConfig
    style: str
    width: float
    height: float
    strategy: str = UNIFORM
    params: Mapping[str, Any] = field(default_factory=dict)

    # --- 構築 ---------------------------------------------------------------
    @classmethod
    def uniform(
        cls,
        width: float,
        height: float,
        *,
        scheme: SchemeKind | str = SchemeKind.MONO,
        distance: float = 0.0,
        complemented: bool = False,
        style: str = Variation.DEFAULT.value,
        **params: Any,
    ) -> "GenerationRequest":
        return cls(
            palette=PaletteConfig(scheme, distance, complemented),
            style=style,
            width=width,
            height=height,
            strategy=UNIFORM,
            params=params,
        )

    @classmethod
    def noise(
        cls,
        width: float,
        height: float,
        *,
        scheme: SchemeKind | str = SchemeKind.MONO,
        distance: float = 0.0,
        complemented: bool = False,
        style: str = Variation.DEFAULT.value,
        **params: Any,
    ) -> "GenerationRequest":
        return cls(
            palette=PaletteConfig(scheme, distance, complemented),
            style=style,
            width=width,
            height=height,
            strategy=NOISE,
            params=params,
        )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], defaults: Mapping[str, Any] | None = None
    ) -> "GenerationRequest":
        """フロントエンド形式の辞書からリクエストを作る。

        Parameters
        ----------
        data : Mapping[str, Any]
            リクエスト辞書（上記モジュール docstring 参照）。
        defaults : Mapping[str, Any] | None
            欠損値の補完元。None なら `configs/default.yaml` の `generation` を読む。
        """
        if not isinstance(data, Mapping):
            raise InvalidRequest(f"request must be a mapping: got {type(data).__name__}")
        d = generation_defaults() if defaults is None else defaults

        for key in ("width", "height"):
            if data.get(key) is None:
                raise InvalidRequest(f"missing required field: {key}")

        given = {
            _PARAM_ALIASES[k]: v for k, v in data.items() if k in _PARAM_ALIASES and v is not None
        }
        strategy = data.get("strategy")
        if strategy is None:
            is_noise = any(k in given for k in _NOISE_ONLY)
            if is_noise and "count" in given:
                raise InvalidRequest("ambiguous request: both count and noise parameters given")
            strategy = NOISE if is_noise else UNIFORM
        if not isinstance(strategy, str) or not is_distributor_registered(strategy):
            raise InvalidRequest(f"unknown strategy: {strategy!r}")
        strategy = normalize_key(strategy)

        params: dict[str, Any] = {}
        for name in _STRATEGY_PARAMS.get(strategy, tuple(given)):
            if name in given:
                params[name] = given[name]
            elif d.get(name) is not None:
                params[name] = d[name]

        return cls(
            palette=PaletteConfig.from_mapping(data.get("scheme"), d),
            style=str(_or_default(data.get("style"), d.get("style", Variation.DEFAULT.value))),
            width=_as_float(data["width"], "width"),
            height=_as_float(data["height"], "height"),
            strategy=strategy,
            params=params,
        )

    # --- 検証 ---------------------------------------------------------------
    @property
    def bounds(self) -> Bounds:
        return Bounds(self.width, self.height)

    @property
    def variation(self) -> Variation:
        try:
            return Variation.from_value(self.style)
        except ValueError as exc:
            raise InvalidVariation(str(exc)) from exc

    def validate(self) -> tuple[Bounds, dict[str, Any]]:
        """キャンバス・バリエーション・戦略パラメータを検証する（乱数は引かない）。

        Returns
        -------
        tuple[Bounds, dict[str, Any]]
            検証済みの境界と、配置戦略へそのまま渡せる正規化済みパラメータ。
        """
        bounds = self.bounds
        _ = self.variation
        try:
            fn = get_distributor(self.strategy)
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidRequest(f"unknown strategy: {self.strategy!r}") from exc
        params = fn.__validate__(bounds=bounds, **dict(self.params))
        return bounds, params

    def echo(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """結果に添えて返すリクエスト内容（フロントエンド形式）。

        `params` に検証済みパラメータを渡すとそちらを返す（既定値の補完・正規化後の値）。
        """
        out: dict[str, Any] = {
            "scheme": self.palette.to_dict(),
            "style": self.style,
            "width": self.width,
            "height": self.height,
            "strategy": self.strategy,
        }
        for name, value in (self.params if params is None else params).items():
            key = "sizeRange" if name == "size_range" else name
            out[key] = list(value) if isinstance(value, tuple) else value
        return out


__all__ = ["PaletteConfig", "GenerationRequest", "UNIFORM", "NOISE"]

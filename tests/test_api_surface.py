from __future__ import annotations

# What this tests
# - The public API surface imports from a single namespace.
# - `generate` / `generate_from_mapping` produce the frontend payload and honor seeds.

import pytest


def test_api_import_and_min_flow():
    from api import GenerationRequest, GenerationResult, generate

    req = GenerationRequest.uniform(320, 240, scheme="contrast", count=7)
    result = generate(req, seed=10)
    assert isinstance(result, GenerationResult)
    assert len(result) == 7
    assert generate(req, seed=10) == result


def test_generate_from_mapping_payload():
    from api import generate_from_mapping

    payload = generate_from_mapping(
        {
            "scheme": {"scheme": "triade", "distance": 0.4, "complemented": False},
            "style": "soft",
            "width": 800,
            "height": 600,
            "step": 40,
            "sparsity": 0.2,
            "skew": [0.8, 1.2],
            "sizeRange": [10, 60],
        },
        seed=42,
    ).to_dict()
    assert payload["strategy"] == "noise"
    assert len(payload["colors"]) == 12
    assert payload["background"] in payload["colors"]
    assert payload["sizeRange"] == [10.0, 60.0]
    for f in payload["filters"]:
        assert 10.0 < f["width"] <= 60.0


def test_errors_are_exported():
    from api import GenerationError, InvalidCount, generate_from_mapping

    with pytest.raises(InvalidCount):
        generate_from_mapping({"width": 10, "height": 10, "count": -3}, seed=0)
    assert issubclass(InvalidCount, GenerationError)


def test_custom_distributor_via_api():
    from api import Shape, distributor, generate_from_mapping
    from distributors.registry import unregister

    @distributor("center_only")
    def _center(bounds, colors, *, rng):  # noqa: ANN001 - テスト用
        return [Shape(bounds.width / 2, bounds.height / 2, 10.0, 10.0, colors[0])]

    try:
        result = generate_from_mapping(
            {"width": 100, "height": 50, "strategy": "center_only"}, seed=1, defaults={}
        )
        assert [(s.x, s.y) for s in result.shapes] == [(50.0, 25.0)]
    finally:
        unregister("center_only")

from __future__ import annotations

import pytest

from common.errors import EmptyPalette, InvalidStep, InvalidVariation
from engine.generation import GenerationRequest, GenerationService, PaletteBuilder
from util.random import RandomSource


def test_mono_uniform_scenario() -> None:
    req = GenerationRequest.uniform(800, 600, scheme="mono", style="default", count=20)
    result = GenerationService(RandomSource(42)).generate(req)
    assert len(result.colors) == 4
    assert len(result) == 20
    assert result.background in result.colors
    for s in result.shapes:
        assert s.color in result.colors
        assert 0.0 <= s.x < 800.0 and 0.0 <= s.y < 600.0


def test_noise_scenario() -> None:
    req = GenerationRequest.noise(800, 600, scheme="contrast", step=50, sparsity=0.0)
    result = GenerationService(RandomSource(8)).generate(req)
    assert len(result.colors) == 8
    assert len(result) <= 192
    assert result.request["strategy"] == "noise"


def test_seed_reproducibility() -> None:
    req = GenerationRequest.noise(640, 480, scheme="tetrade", distance=0.3, sparsity=0.1)
    a = GenerationService(RandomSource(99)).generate(req)
    b = GenerationService(RandomSource(99)).generate(req)
    assert a == b
    assert a.to_dict() == b.to_dict()


def test_to_dict_payload_shape() -> None:
    req = GenerationRequest.uniform(300, 200, scheme="analogic", distance=0.5, complemented=True)
    payload = GenerationService(RandomSource(1)).generate(req).to_dict()
    for key in ("background", "colors", "filters", "hue", "scheme", "style", "width", "height"):
        assert key in payload
    assert len(payload["colors"]) == 16
    assert payload["filters"][0].keys() == {"x", "y", "width", "height", "color"}
    assert payload["scheme"]["complemented"] is True


@pytest.mark.parametrize(
    "req,exc",
    [
        (GenerationRequest.noise(800, 600, step=0), InvalidStep),
        (GenerationRequest.noise(1e12, 1e12, step=1e-3), InvalidStep),
        (GenerationRequest.uniform(800, 600, style="neon"), InvalidVariation),
    ],
)
def test_configuration_errors_before_any_draw(req: GenerationRequest, exc: type) -> None:
    rng = RandomSource(5)
    with pytest.raises(exc):
        GenerationService(rng).generate(req)
    assert rng.uniform(0, 1) == RandomSource(5).uniform(0, 1)


def test_empty_palette_propagates() -> None:
    service = GenerationService(RandomSource(0), PaletteBuilder(lambda *a: ()))
    with pytest.raises(EmptyPalette):
        service.generate(GenerationRequest.uniform(10, 10))


def test_generate_from_mapping() -> None:
    service = GenerationService(RandomSource(3))
    result = service.generate_from_mapping({"width": 200, "height": 100, "count": 5}, {})
    assert len(result) == 5
    assert result.request["count"] == 5


def test_mapping_defaults_loaded_once_at_construction(monkeypatch: pytest.MonkeyPatch) -> None:
    import util.utils

    service = GenerationService(RandomSource(3), defaults={"count": 3, "style": "hard"})

    def _no_disk(*args, **kwargs):  # noqa: ANN001 - テスト用
        raise AssertionError("config files must not be read per request")

    monkeypatch.setattr(util.utils, "load_config", _no_disk)
    for _ in range(2):
        result = service.generate_from_mapping({"width": 50, "height": 50})
        assert len(result) == 3
        assert result.request["style"] == "hard"

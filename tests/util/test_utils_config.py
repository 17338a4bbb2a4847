from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import _find_project_root, generation_defaults, load_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    got = _find_project_root(a)
    assert got == a.parent.parent


def test_load_config_merges_default_and_root(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "generation:\n  count: 20\n  step: 50\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("generation:\n  count: 5\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg["generation"] == {"count": 5, "step": 50}
    assert cfg["other"] == 1


def test_load_config_tolerates_missing_and_broken_files(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("generation: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    assert generation_defaults(tmp_path) == {}


@pytest.mark.integration
def test_repository_defaults_are_shipped() -> None:
    d = generation_defaults()
    assert d.get("count") == 20
    assert d.get("scheme") == "mono"
    assert list(d.get("size_range")) == [20, 80]


def test_generation_defaults_read_once_per_root(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    cfg = tmp_path / "configs" / "default.yaml"
    cfg.write_text("generation:\n  count: 7\n", encoding="utf-8")
    assert generation_defaults(tmp_path)["count"] == 7

    cfg.write_text("generation:\n  count: 9\n", encoding="utf-8")
    assert generation_defaults(tmp_path)["count"] == 7
    assert generation_defaults(tmp_path, reload=True)["count"] == 9


def test_generation_defaults_returns_a_copy(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("generation:\n  count: 1\n", encoding="utf-8")
    generation_defaults(tmp_path)["count"] = 100
    assert generation_defaults(tmp_path)["count"] == 1

from __future__ import annotations

import json
from pathlib import Path

import pytest

from scripts.generate import main


def test_cli_uniform_json(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "800", "--height", "600", "--scheme", "mono", "--count", "20", "--seed", "1"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["filters"]) == 20
    assert len(payload["colors"]) == 4
    assert payload["strategy"] == "uniform"


def test_cli_is_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    args = ["--width", "400", "--height", "300", "--step", "30", "--sparsity", "0.3", "--seed", "5"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_cli_request_file_with_flag_override(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    req = tmp_path / "request.yaml"
    req.write_text(
        "scheme: {scheme: contrast, distance: 0.0}\nstyle: pale\nwidth: 300\nheight: 200\ncount: 3\n",
        encoding="utf-8",
    )
    code = main(["--request", str(req), "--count", "6", "--complement", "--seed", "2"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["filters"]) == 6
    assert payload["style"] == "pale"
    assert payload["scheme"] == {"scheme": "contrast", "distance": 0.0, "complemented": True}


def test_cli_configuration_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "800", "--height", "600", "--step", "0"])
    assert code == 2
    assert "InvalidStep" in capsys.readouterr().err


def test_cli_missing_request_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--request", str(tmp_path / "nope.json")])
    assert code == 2
    assert "cannot read request" in capsys.readouterr().err


def test_cli_oversized_grid_is_a_configuration_error(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--width", "1e12", "--height", "1e12", "--step", "0.001", "--seed", "0"])
    assert code == 2
    assert "InvalidStep" in capsys.readouterr().err

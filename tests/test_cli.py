"""Tests for the simulation CLI."""

from __future__ import annotations

import json

import pytest

from prediction_sim.cli.simulate_cli import main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_summary(capsys) -> None:
    assert _run(["--length", "80", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "SIMULATION RESULTS" in out
    assert "Points:          80" in out


def test_state_at_time(capsys) -> None:
    assert _run(["--length", "200", "--seed", "3", "--at", "60"]) == 0

    out = capsys.readouterr().out
    assert "Agent state at t = " in out
    assert "Decision log" in out
    assert "News feed" in out


def test_json_output(capsys) -> None:
    assert _run(["--length", "40", "--seed", "5", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert len(data["points"]) == 40
    assert data["config"]["seed"] == 5


def test_json_output_is_reproducible(capsys) -> None:
    _run(["--length", "40", "--seed", "5", "--json"])
    first = capsys.readouterr().out
    _run(["--length", "40", "--seed", "5", "--json"])
    second = capsys.readouterr().out

    assert first == second


def test_config_file_with_overrides(tmp_path, capsys) -> None:
    path = tmp_path / "sim.json"
    path.write_text(json.dumps({"length": 30, "seed": 1}), encoding="utf-8")

    assert _run(["--config", str(path), "--length", "25", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert len(data["points"]) == 25
    assert data["config"]["seed"] == 1


def test_invalid_length_exits_with_error() -> None:
    assert _run(["--length", "1"]) == 2


def test_at_and_json_are_mutually_exclusive(capsys) -> None:
    assert _run(["--length", "40", "--json", "--at", "10"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "--at cannot be combined with --json" in captured.err


def test_missing_config_file(tmp_path) -> None:
    assert _run(["--config", str(tmp_path / "nope.json")]) == 1

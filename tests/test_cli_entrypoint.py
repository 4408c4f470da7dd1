from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

from slime_finder.search import SlimeChunkSearch


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("slime_finder.main")

    assert hasattr(module, "app")
    assert module.app is not None


def _runner():
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from slime_finder.main import app

    return CliRunner(), app


def test_seed_command_hashes_text() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["seed", "hello"])

    assert result.exit_code == 0
    assert "99162322" in result.stdout


def test_check_command_reports_slime_chunk() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["check", "--seed", "12345", "--x", "4", "--z=-3"])

    assert result.exit_code == 0
    assert "True" in result.stdout


def test_search_json_matches_library_result() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["search", "--seed", "12345", "--range", "10", "--top", "3", "--workers", "1", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    expected = SlimeChunkSearch(12345, workers=1).run(10)
    assert payload["best"]["count"] == expected.best.count
    assert payload["candidates_evaluated"] == 100
    assert len(payload["top"]) == 3
    assert len(payload["slime_chunks"]) == expected.best.count


def test_search_prints_human_report() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["search", "--seed", "hello", "--range", "4", "--workers", "1"])

    assert result.exit_code == 0
    assert "Seed: 99162322 (hello)" in result.stdout
    assert "Max slime chunk is" in result.stdout


def test_search_rejects_non_positive_range() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["search", "--seed", "1", "--range", "0"])

    assert result.exit_code != 0


def test_search_writes_plot(tmp_path: Path) -> None:
    pytest.importorskip("matplotlib")
    runner, app = _runner()
    target = tmp_path / "plots" / "slime.png"

    result = runner.invoke(
        app,
        ["search", "--seed", "12345", "--range", "4", "--workers", "1", "--json", "--plot", str(target)],
    )

    assert result.exit_code == 0
    assert target.exists()
    assert json.loads(result.stdout)["plot"] == str(target)


def test_seed_command_does_not_flag_signed_numbers_as_hashed() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["seed", "+5"])

    assert result.exit_code == 0
    assert "'seed': 5" in result.stdout
    assert "'hashed': False" in result.stdout


def test_unknown_log_level_is_a_usage_error() -> None:
    runner, app = _runner()

    result = runner.invoke(app, ["--log-level", "loud", "seed", "1"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)

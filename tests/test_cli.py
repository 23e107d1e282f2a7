"""Tests for the command-line interface."""

import importlib
from pathlib import Path

from typer.testing import CliRunner

from pw_effects import cli, config
from pw_effects.errors import ResolutionError

runner = CliRunner()


def test_crawl_success(monkeypatch, tmp_path):
    """Options override settings and the output path is reported."""
    seen = {}

    async def fake_run_pipeline(settings, progress=None):
        seen["settings"] = settings
        return settings.output_path

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)
    output = tmp_path / "effects.json"

    result = runner.invoke(
        cli.app, ["crawl", "--output", str(output), "--limit", "20", "--batch-size", "2", "--no-progress"]
    )

    assert result.exit_code == 0, result.output
    assert "Done, saved to" in result.output
    assert seen["settings"].output_path == output
    assert seen["settings"].name_limit == 20
    assert seen["settings"].batch_size == 2


def test_crawl_defaults(monkeypatch):
    seen = {}

    async def fake_run_pipeline(settings, progress=None):
        seen["settings"] = settings
        return settings.output_path

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)

    result = runner.invoke(cli.app, ["crawl", "--no-progress"])

    assert result.exit_code == 0, result.output
    assert seen["settings"].output_path == Path("elist.json")
    assert seen["settings"].batch_size == 5


def test_crawl_failure_exits_nonzero(monkeypatch):
    async def failing_run_pipeline(settings, progress=None):
        raise ResolutionError("LSD", "Lookup failed for 'LSD': timed out")

    monkeypatch.setattr(cli, "run_pipeline", failing_run_pipeline)

    result = runner.invoke(cli.app, ["crawl", "--no-progress"])

    assert result.exit_code == 1
    assert "Lookup failed" in result.output
    assert "Done" not in result.output


def test_crawl_rejects_bad_log_level(monkeypatch):
    async def fake_run_pipeline(settings, progress=None):
        raise AssertionError("should not run")

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)

    result = runner.invoke(cli.app, ["crawl", "--log-level", "chatty", "--no-progress"])

    assert result.exit_code == 2


def test_show_config():
    result = runner.invoke(cli.app, ["show-config"])
    assert result.exit_code == 0
    assert "batch_size" in result.output
    assert "psychonautwiki.org" in result.output


def test_bad_environment_is_a_configuration_error(monkeypatch):
    """Invalid PW_EFFECTS_* values are reported, not raised at import time."""
    monkeypatch.setenv("PW_EFFECTS_BATCH_SIZE", "0")

    async def fake_run_pipeline(settings, progress=None):
        raise AssertionError("should not run")

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)

    importlib.reload(config)
    result = runner.invoke(cli.app, ["crawl", "--no-progress"])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output

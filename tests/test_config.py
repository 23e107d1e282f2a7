"""Tests for configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from pw_effects.config import Settings


def test_default_settings():
    """Test that default settings are valid."""
    s = Settings()
    assert s.name_limit == 150
    assert s.batch_size == 5
    assert s.extract_concurrency is None
    assert s.output_path == Path("elist.json")
    assert s.log_level == "INFO"


def test_default_endpoints():
    """Test that upstream endpoints point at TripSit and PsychonautWiki."""
    s = Settings()
    assert s.catalog_url.endswith("/api/tripsit/getAllDrugs")
    assert s.wiki_api_url == "https://psychonautwiki.org/w/api.php"


def test_env_override(monkeypatch):
    """Test that PW_EFFECTS_* environment variables are picked up."""
    monkeypatch.setenv("PW_EFFECTS_BATCH_SIZE", "3")
    monkeypatch.setenv("PW_EFFECTS_OUTPUT_PATH", "out/effects.json")
    s = Settings()
    assert s.batch_size == 3
    assert s.output_path == Path("out/effects.json")


@pytest.mark.parametrize("field", ["batch_size", "name_limit"])
def test_limits_must_be_positive(field):
    """Test that zero limits are rejected."""
    with pytest.raises(ValidationError):
        Settings(**{field: 0})


def test_summary_is_printable():
    """Test summary values are strings for display."""
    s = Settings(extract_concurrency=4)
    summary = s.summary()
    assert summary["extract_concurrency"] == "4"
    assert summary["batch_size"] == "5"
    assert all(isinstance(v, str) for v in summary.values())

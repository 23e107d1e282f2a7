"""Pytest configuration and fixtures."""

import pytest

from pw_effects.schemas import CatalogEntry, EffectQueryResult, MatchResult


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run tests that call the real TripSit and PsychonautWiki services",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "live: mark test as requiring network access")


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless --run-live is provided."""
    if config.getoption("--run-live"):
        # --run-live given: do not skip live tests
        return

    skip_live = pytest.mark.skip(reason="Need --run-live option to run live service tests")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def catalog():
    """Two-entry catalog: one alias on the first drug, none on the second."""
    return [
        CatalogEntry(name="A", aliases=["A1"]),
        CatalogEntry(name="B", aliases=[]),
    ]


@pytest.fixture
def fake_search():
    """Search capability matching only the names in `known`."""

    def make(known):
        async def search(name):
            return MatchResult(name, [name] if name in known else [])

        return search

    return make


@pytest.fixture
def fake_query():
    """Relationship query answering from a name -> ask "query" mapping."""

    def make(responses):
        async def query(name):
            return EffectQueryResult(name, responses.get(name, {}))

        return query

    return make

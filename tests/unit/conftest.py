"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no network, fake remote source)
- Deterministic (same result every time)
"""

import pytest
from datetime import date

from trajectory.repositories import DataStore, configure_data_store


@pytest.fixture
def fixed_today():
    """Fixed date for deterministic end-date tests."""
    return date(2024, 1, 15)


@pytest.fixture
def store(fake_source):
    """Data store over the fake source."""
    return DataStore(fake_source)


@pytest.fixture
def project_with_stories(make_source):
    """
    Build a project wired to its own fake store.

    Usage:
        project = project_with_stories(velocity=14, points=[3, 5, 2])
    """
    def build(velocity=14, points=(), states=None, historic=(), **fields):
        states = states or ["unstarted"] * len(points)
        stories = [
            {"id": 100 + i, "points": p, "state": s}
            for i, (p, s) in enumerate(zip(points, states))
        ]
        record = {"id": 1, "estimated_velocity": velocity, "historic_velocity": list(historic), **fields}
        source = make_source([record], {1: stories})
        return DataStore(source).fetch_projects()[0]

    return build


@pytest.fixture(autouse=True)
def reset_process_store():
    """Never leak a configured process-wide store between tests."""
    yield
    configure_data_store()

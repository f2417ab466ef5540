"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, no I/O, fake remote source
- integration/ Component boundaries: data store over the HTTP source
               with a fake session, settings files in temp dirs

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from trajectory.repositories import RemoteSource


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")
    config.addinivalue_line("markers", "slow: Tests that take > 1s")


class FakeRemoteSource(RemoteSource):
    """In-memory remote source that counts every call."""

    def __init__(self, projects=None, stories=None, delay: float = 0.0):
        self.projects = projects or []
        self.stories = stories or {}  # project id -> list of records
        self.delay = delay
        self.project_calls = 0
        self.story_calls: dict[int, int] = {}

    def list_projects(self) -> list[dict]:
        self.project_calls += 1
        self._wait()
        return [dict(p) for p in self.projects]

    def list_stories(self, project_id, keyword=None) -> list[dict]:
        self.story_calls[project_id] = self.story_calls.get(project_id, 0) + 1
        self._wait()
        return [dict(s) for s in self.stories.get(project_id, [])]

    def _wait(self) -> None:
        if self.delay:
            import time
            time.sleep(self.delay)


@pytest.fixture
def project_records():
    """Raw project records, as the API sends them."""
    return [
        {
            "id": 1,
            "name": "Website",
            "keyword": "website",
            "archived": False,
            "estimatedVelocity": 14,
            "historicVelocity": [0, 3, 0, 5, 0],
            "createdAt": "2024-01-15T12:00:00Z",
            "updatedAt": "2024-02-01T08:30:00.123456Z",
            "completedIterationsCount": 5,
            "completedStoriesCount": 12,
        },
        {
            "id": 2,
            "name": "Mobile app",
            "keyword": "mobile",
            "archived": True,
            "estimatedVelocity": 0,
            "historicVelocity": [0, 0, 0],
        },
        {
            "id": 3,
            "name": "Intranet",
            "keyword": "intranet",
            "archived": False,
            "estimatedVelocity": 7,
            "historicVelocity": [],
        },
    ]


@pytest.fixture
def story_records():
    """Raw story records keyed by project id."""
    return {
        1: [
            {"id": 10, "title": "Sign up", "points": 3, "state": "accepted"},
            {"id": 11, "title": "Log in", "points": 5, "state": "started"},
            {"id": 12, "title": "Reset password", "points": 2, "state": "unstarted"},
        ],
        2: [],
        3: [
            {"id": 30, "title": "Directory", "points": 4, "state": "delivered"},
            {"id": 31, "title": "News feed", "points": 6, "state": "rejected"},
        ],
    }


@pytest.fixture
def fake_source(project_records, story_records):
    return FakeRemoteSource(project_records, story_records)


@pytest.fixture
def make_source():
    """Factory for call-counting fake sources."""
    return FakeRemoteSource

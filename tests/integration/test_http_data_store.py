"""
Integration: DataStore over HttpRemoteSource.

The HTTP session is faked at the requests boundary; everything above it
(URL building, unwrapping, conversion, caching, metrics) is real.
"""

import pytest
from datetime import date
from unittest.mock import MagicMock

from trajectory.config import TrajectorySettings
from trajectory.models import Projects, VelocityEqualToZero
from trajectory.repositories import DataStore, HttpRemoteSource

BASE = "https://example.test/api/key/accounts/acme"

PAYLOADS = {
    f"{BASE}/projects.json": [
        {
            "id": 1,
            "name": "Website",
            "keyword": "website",
            "archived": False,
            "estimated_velocity": 14,
            "historic_velocity": [0, 6, 0],
            "created_at": "2024-01-02T10:00:00Z",
        },
        {"id": 2, "name": "Legacy", "keyword": "legacy", "archived": True, "estimated_velocity": 0},
    ],
    f"{BASE}/projects/website/stories.json": {
        "stories": [
            {"id": 10, "title": "Sign up", "points": 3, "state": "accepted", "project_id": 1},
            {"id": 11, "title": "Log in", "points": 5, "state": "started", "project_id": 1},
            {"id": 12, "title": "Reset password", "points": 2, "state": "unstarted", "project_id": 1},
        ]
    },
    f"{BASE}/projects/legacy/stories.json": {"stories": [{"id": 20, "points": 1, "state": "started"}]},
}


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}

    def get(url, timeout=None):
        response = MagicMock()
        response.json.return_value = PAYLOADS[url]
        return response

    session.get.side_effect = get
    return session


@pytest.fixture
def store(session):
    settings = TrajectorySettings(api_key="key", account_keyword="acme", base_url="https://example.test/api")
    return DataStore(HttpRemoteSource(settings, session=session))


class TestHttpDataStore:
    """End-to-end through the HTTP source."""

    def test_projects_and_metrics(self, store, session):
        projects = Projects.fetch_all(store)
        website = projects.find_by_keyword("website")

        assert [p.id for p in projects.active()] == [1]
        assert website.total_points() == 10
        assert website.remaining_points() == 7
        assert website.accepted_points() == 3
        assert website.percent_complete() == 30.0
        assert website.remaining_days() == 4  # 7 / 2.0 = 3.5
        assert website.remaining_working_days() == 3  # 7 / 2.8 = 2.5
        assert website.remaining_iterations() == 1
        assert website.estimated_end_date(today=date(2024, 3, 1)) == date(2024, 3, 5)
        assert website.last_non_null_velocity() == 6

    def test_each_url_fetched_once(self, store, session):
        website = Projects.fetch_all(store).find_by_keyword("website")
        website.stories()
        website.total_points()
        website.remaining_days()
        Projects.fetch_all(store)

        urls = [call.args[0] for call in session.get.call_args_list]
        assert urls == [f"{BASE}/projects.json", f"{BASE}/projects/website/stories.json"]

    def test_story_back_reference(self, store):
        website = store.find_project_by_id(1)
        story = website.stories().started()[0]

        assert story.title == "Log in"
        assert story.project() is website

    def test_zero_velocity_project(self, store):
        legacy = store.find_project_by_id(2)

        assert legacy.percent_complete() == 0.0
        with pytest.raises(VelocityEqualToZero):
            legacy.remaining_days()

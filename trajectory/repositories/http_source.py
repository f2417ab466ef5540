"""
HTTP backend - reads records from the Trajectory REST API.

URL structure:
    {base_url}/{api_key}/accounts/{account_keyword}/
        projects.json                     - Every project of the account
        projects/{keyword}/stories.json   - Stories of one project
"""

from typing import Optional

import requests

from ..config import TrajectorySettings, load_settings
from ..models.errors import RemoteSourceError
from .base import RemoteSource


class HttpRemoteSource(RemoteSource):
    """requests-based implementation of the remote source. No retries."""

    def __init__(self, settings: TrajectorySettings = None, session: requests.Session = None):
        self.settings = settings or load_settings()
        self.settings.require_credentials()
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def _get(self, path: str):
        url = f"{self.settings.account_url}{path}"
        try:
            response = self._session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            # Never echo the URL: it embeds the API key
            print(f"[http] GET {path} failed: {type(e).__name__}")
            raise RemoteSourceError(f"GET {path} failed: {type(e).__name__}") from e

        try:
            return response.json()
        except ValueError as e:
            # Covers requests.JSONDecodeError, which is a ValueError
            print(f"[http] GET {path} returned invalid JSON")
            raise RemoteSourceError(f"GET {path} returned invalid JSON") from e

    @staticmethod
    def _unwrap(payload, key: str) -> list[dict]:
        """Accept both a bare list and an object wrapping it under `key`."""
        if isinstance(payload, dict) and key in payload:
            payload = payload[key]
        if not isinstance(payload, list):
            raise RemoteSourceError(f"Expected a list of {key}, got {type(payload).__name__}")
        if not all(isinstance(item, dict) for item in payload):
            raise RemoteSourceError(f"Expected every item of {key} to be an object")
        return payload

    def list_projects(self) -> list[dict]:
        return self._unwrap(self._get("/projects.json"), "projects")

    def list_stories(self, project_id: int, keyword: Optional[str] = None) -> list[dict]:
        segment = keyword or project_id
        return self._unwrap(self._get(f"/projects/{segment}/stories.json"), "stories")

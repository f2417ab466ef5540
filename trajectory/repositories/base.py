"""
Remote source interface - where raw records come from.
"""

from abc import ABC, abstractmethod
from typing import Optional


class RemoteSource(ABC):
    """
    Read-only access to the Trajectory API.

    Implementations return raw, untyped records (JSON objects decoded to
    dicts). Authentication, URLs and HTTP status handling are theirs;
    conversion into entities happens in the data store.
    """

    @abstractmethod
    def list_projects(self) -> list[dict]:
        """Raw records of every project in the account."""
        pass

    @abstractmethod
    def list_stories(self, project_id: int, keyword: Optional[str] = None) -> list[dict]:
        """Raw records of every story of a project."""
        pass

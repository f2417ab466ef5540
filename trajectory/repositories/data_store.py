"""
Data store - fetches raw records once and keeps the typed collections.

Slots:
    projects            - every project of the account
    stories/{id}        - stories of one project, fetched on first request

Nothing is ever invalidated: the remote data is read-only from our side,
so a slot stays valid for the life of the store.
"""

import threading
from typing import Optional

from ..models import Project, Projects, Stories
from .base import RemoteSource

_PROJECTS_SLOT = "projects"


class DataStore:
    """
    Single-flight cache between a remote source and the domain model.

    Each slot has its own lock. Concurrent first callers of a slot wait
    for one remote call and all get the same collection object. A failed
    fetch or conversion leaves the slot empty so a later call can retry.
    """

    def __init__(self, source: RemoteSource):
        self._source = source
        self._projects: Optional[Projects] = None
        self._stories: dict[int, Stories] = {}
        self._registry_lock = threading.Lock()
        self._slot_locks: dict[str, threading.Lock] = {}

    @property
    def source(self) -> RemoteSource:
        return self._source

    def _slot_lock(self, slot: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._slot_locks.get(slot)
            if lock is None:
                lock = self._slot_locks[slot] = threading.Lock()
            return lock

    def fetch_projects(self) -> Projects:
        """Every project of the account. One remote call per store."""
        projects = self._projects
        if projects is not None:
            return projects

        with self._slot_lock(_PROJECTS_SLOT):
            if self._projects is None:
                records = self._source.list_projects()
                self._projects = Projects.from_raw(records, data_store=self)
                print(f"[datastore] Fetched {len(self._projects)} projects")
            return self._projects

    def fetch_stories(self, project: Project) -> Stories:
        """Stories of a project. One remote call per project id."""
        stories = self._stories.get(project.id)
        if stories is not None:
            return stories

        with self._slot_lock(f"stories/{project.id}"):
            stories = self._stories.get(project.id)
            if stories is None:
                records = self._source.list_stories(project.id, keyword=project.keyword)
                # Stories belong to the project we asked for, whatever the record says
                stories = Stories.from_raw(records, data_store=self, project_id=project.id)
                self._stories[project.id] = stories
                print(f"[datastore] Fetched {len(stories)} stories for project {project.id}")
            return stories

    def find_project_by_id(self, id: int) -> Optional[Project]:
        """Project with the given id, or None. Fetches projects if needed."""
        return self.fetch_projects().find_by_id(id)

    def has_projects(self) -> bool:
        """Check if the projects slot is populated."""
        return self._projects is not None

    def has_stories(self, project_id: int) -> bool:
        """Check if the stories slot of a project is populated."""
        return project_id in self._stories

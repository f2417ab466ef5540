"""
Story - a unit of work inside a project.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional, Protocol, runtime_checkable
from pydantic import field_validator

from .base import TrajectoryEntity


class StoryState(str, Enum):
    """Workflow states reported by the API."""
    UNSTARTED = "unstarted"
    STARTED = "started"
    FINISHED = "finished"
    DELIVERED = "delivered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# States from which no further progress is expected
COMPLETED_STATES = frozenset({
    StoryState.FINISHED.value,
    StoryState.DELIVERED.value,
    StoryState.ACCEPTED.value,
})


@runtime_checkable
class Iteration(Protocol):
    """Anything that can tell whether a story belongs to it."""

    def includes(self, story: "Story") -> bool:
        ...


class Story(TrajectoryEntity):
    """
    A story of a project.

    The owning project is referenced by id only and resolved on demand
    through the data store.
    """
    entity_kind: ClassVar[str] = "story"

    id: int
    assignee_name: Optional[str] = None
    task_type: Optional[str] = None
    title: Optional[str] = None
    idea_subject: Optional[str] = None
    user_name: Optional[str] = None
    position: Optional[int] = None
    points: Optional[int] = None  # None = not estimated
    comments_count: Optional[int] = None
    project_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    state_events: tuple[str, ...] = ()
    design_needed: bool = False
    development_needed: bool = False
    archived: bool = False
    deleted: bool = False
    state: Optional[str] = None

    @field_validator("state", mode="before")
    @classmethod
    def _normalize_state(cls, value):
        if isinstance(value, StoryState):
            return value.value
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def is_started(self) -> bool:
        return self.state == StoryState.STARTED

    @property
    def is_unstarted(self) -> bool:
        return self.state == StoryState.UNSTARTED

    @property
    def is_completed(self) -> bool:
        return self.state in COMPLETED_STATES

    def in_iteration(self, iteration: Iteration) -> bool:
        """Check membership in an iteration."""
        return iteration.includes(self)

    def project(self):
        """Resolve the owning project, or None if unknown."""
        if self.project_id is None:
            return None
        data_store = self._data_store
        if data_store is None:
            from ..repositories import get_data_store
            data_store = get_data_store()
        return data_store.find_project_by_id(self.project_id)

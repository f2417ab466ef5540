"""
Project - the root aggregate.
"""

from datetime import date, datetime
from typing import ClassVar, Optional
from pydantic import PrivateAttr, field_validator

from . import metrics
from .base import TrajectoryEntity


class Project(TrajectoryEntity):
    """
    A Trajectory project.

    Attributes map one to one onto the API's project record. Stories are
    fetched the first time they are needed and kept on the project;
    every metric below is computed from them.
    """
    entity_kind: ClassVar[str] = "project"

    # Identity
    id: int
    keyword: Optional[str] = None  # Unique within the account
    name: Optional[str] = None

    archived: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Velocity, in points per iteration
    estimated_velocity: int = 0
    historic_velocity: tuple[int, ...] = ()  # Oldest first

    completed_iterations_count: Optional[int] = None
    completed_stories_count: Optional[int] = None

    _stories: Optional[object] = PrivateAttr(default=None)

    @field_validator("historic_velocity", mode="before")
    @classmethod
    def _null_velocity_is_zero(cls, value):
        if isinstance(value, (list, tuple)):
            return [0 if v is None else v for v in value]
        return value

    # === Relations ===

    def stories(self):
        """Stories of the project, fetched on first access."""
        if self._stories is None:
            data_store = self._data_store
            if data_store is None:
                from ..repositories import get_data_store
                data_store = get_data_store()
            self._stories = data_store.fetch_stories(self)
        return self._stories

    def stories_in_iteration(self, iteration):
        """Stories of the project that belong to the given iteration."""
        return self.stories().in_iteration(iteration)

    # === Points ===

    def total_points(self) -> int:
        return metrics.total_points(self.stories())

    def remaining_points(self) -> int:
        return metrics.remaining_points(self.stories())

    def accepted_points(self) -> int:
        return metrics.accepted_points(self.stories())

    def percent_complete(self) -> float:
        return metrics.percent_complete(self.stories())

    # === Velocity and schedule ===

    def estimated_velocity_per_day(self) -> float:
        return metrics.estimated_velocity_per_day(self)

    def estimated_velocity_per_working_day(self) -> float:
        return metrics.estimated_velocity_per_working_day(self)

    def remaining_days(self) -> int:
        return metrics.remaining_days(self, self.stories())

    def remaining_working_days(self) -> int:
        return metrics.remaining_working_days(self, self.stories())

    def remaining_iterations(self) -> int:
        return metrics.remaining_iterations(self, self.stories())

    def estimated_end_date(self, today: Optional[date] = None) -> date:
        return metrics.estimated_end_date(self, self.stories(), today=today)

    def has_started(self) -> bool:
        return metrics.has_started(self)

    def last_non_null_velocity(self) -> int:
        return metrics.last_non_null_velocity(self)

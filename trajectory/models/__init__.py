"""
Domain models - typed entities built from Trajectory API records.

Design principles:
- Every entity defined once
- Validation at the boundary (raw record -> entity)
- Read-only once built
- Transport-agnostic (the data store handles fetching)
"""

from .base import TrajectoryEntity, normalize_key
from .errors import (
    TrajectoryError,
    MissingRequiredField,
    DivisionByZero,
    VelocityEqualToZero,
    VelocityNeverStarted,
    RemoteSourceError,
    ConfigurationError,
)
from .story import Story, StoryState, Iteration, COMPLETED_STATES
from .project import Project
from .collections import EntityCollection, Projects, Stories

__all__ = [
    # Base
    "TrajectoryEntity",
    "normalize_key",
    # Errors
    "TrajectoryError",
    "MissingRequiredField",
    "DivisionByZero",
    "VelocityEqualToZero",
    "VelocityNeverStarted",
    "RemoteSourceError",
    "ConfigurationError",
    # Story
    "Story",
    "StoryState",
    "Iteration",
    "COMPLETED_STATES",
    # Project
    "Project",
    # Collections
    "EntityCollection",
    "Projects",
    "Stories",
]

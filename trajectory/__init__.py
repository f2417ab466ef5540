"""
Trajectory - read-only domain model for the Trajectory project tracker.

Raw API records become typed projects and stories; projects expose
velocity-based progress and schedule estimates.
"""

from .models import (
    Project,
    Projects,
    Story,
    Stories,
    StoryState,
    TrajectoryError,
    MissingRequiredField,
    DivisionByZero,
    VelocityEqualToZero,
    VelocityNeverStarted,
    RemoteSourceError,
    ConfigurationError,
)
from .repositories import DataStore, RemoteSource, HttpRemoteSource, get_data_store, configure_data_store

__version__ = "0.1.0"

__all__ = [
    "Project",
    "Projects",
    "Story",
    "Stories",
    "StoryState",
    "TrajectoryError",
    "MissingRequiredField",
    "DivisionByZero",
    "VelocityEqualToZero",
    "VelocityNeverStarted",
    "RemoteSourceError",
    "ConfigurationError",
    "DataStore",
    "RemoteSource",
    "HttpRemoteSource",
    "get_data_store",
    "configure_data_store",
]

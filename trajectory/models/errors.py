"""
Error taxonomy.

Lookups never raise: a missing project or story is returned as None.
These exceptions cover the genuinely exceptional cases.
"""


class TrajectoryError(Exception):
    """Base for every error raised by this package."""


class MissingRequiredField(TrajectoryError):
    """A raw record lacks a field the entity cannot exist without."""

    def __init__(self, entity_kind: str, field_name: str):
        self.entity_kind = entity_kind
        self.field_name = field_name
        super().__init__(f"{entity_kind} record is missing required field '{field_name}'")


class DivisionByZero(TrajectoryError, ZeroDivisionError):
    """A ratio was requested over an empty total."""


class VelocityEqualToZero(TrajectoryError):
    """The project has no estimated velocity, so it can never be projected to finish."""

    def __init__(self, project):
        self.project = project
        super().__init__(f"Project {project.id} has an estimated velocity of zero")


class VelocityNeverStarted(TrajectoryError):
    """Every historic velocity of the project is zero."""

    def __init__(self, project):
        self.project = project
        super().__init__(f"Project {project.id} has no non-zero historic velocity")


class RemoteSourceError(TrajectoryError):
    """The remote API could not be reached or returned something unusable."""


class ConfigurationError(TrajectoryError):
    """Settings are missing or malformed."""

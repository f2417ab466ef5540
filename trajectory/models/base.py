"""
Base entity class.
"""

import re
from collections.abc import Mapping
from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator

from .errors import MissingRequiredField

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_key(key: str) -> str:
    """Turn 'estimatedVelocity', 'Estimated-Velocity' etc. into 'estimated_velocity'."""
    key = _CAMEL_BOUNDARY.sub("_", str(key).strip())
    return re.sub(r"[\s\-]+", "_", key).lower()


class TrajectoryEntity(BaseModel):
    """
    Base for records materialized from the Trajectory API.

    Entities are read-only once built. Two entities of the same kind are
    equal when their ids are equal; no other attribute is compared.

    Subclasses declare `id` and set `entity_kind`.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",  # The API sends more than we model
    )

    entity_kind: ClassVar[str] = "entity"

    # Collaborator used to resolve lazy relations. Set by the conversion step.
    _data_store: Any = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _normalize_record(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        normalized = {normalize_key(k): v for k, v in data.items()}
        if normalized.get("id") is None:
            raise MissingRequiredField(cls.entity_kind, "id")

        # null means "not provided": let the field default apply
        return {k: v for k, v in normalized.items() if v is not None}

    @classmethod
    def from_raw(cls, record: Mapping, data_store=None, **overrides):
        """
        Build an entity from a raw API record.

        Keys may use any casing. `overrides` are applied after key
        normalization and win over the record's own values.

        Raises:
            MissingRequiredField: if the record has no id
        """
        data = {normalize_key(k): v for k, v in record.items()}
        data.update(overrides)
        entity = cls.model_validate(data)
        entity._data_store = data_store
        return entity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrajectoryEntity):
            return NotImplemented
        return self.entity_kind == other.entity_kind and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.entity_kind, self.id))

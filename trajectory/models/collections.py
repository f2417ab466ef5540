"""
Collections - ordered, read-only views over entities.

A collection wraps a tuple and forwards the sequence protocol to it, so it
can be iterated, indexed, measured and folded like any list. Every query
returns a new collection; the source is never modified and no query goes
back to the remote API.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Callable, Generic, Optional, TypeVar, Union, overload

from .project import Project
from .story import Iteration, Story

T = TypeVar("T")


class EntityCollection(Sequence, Generic[T]):
    """Base for typed entity collections."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: tuple[T, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "EntityCollection[T]": ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EntityCollection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def filter(self, predicate: Callable[[T], bool]) -> "EntityCollection[T]":
        """New collection holding the items for which predicate is true."""
        return type(self)(item for item in self._items if predicate(item))

    def to_list(self) -> list[T]:
        """Plain list copy of the items."""
        return list(self._items)


class Projects(EntityCollection[Project]):
    """A collection of projects, in the order the API returned them."""

    @classmethod
    def from_raw(cls, records: Iterable[Mapping], data_store=None) -> "Projects":
        """
        Convert raw API records into a collection.

        A single bad record aborts the whole batch: a collection with
        silently dropped projects would be wrong.
        """
        return cls(Project.from_raw(record, data_store=data_store) for record in records)

    @classmethod
    def fetch_all(cls, data_store=None) -> "Projects":
        """All projects of the account, fetched once per data store."""
        if data_store is None:
            from ..repositories import get_data_store
            data_store = get_data_store()
        return data_store.fetch_projects()

    def find_by_id(self, id: int) -> Optional[Project]:
        """Project with the given id, or None."""
        return next((p for p in self._items if p.id == id), None)

    def find_by_keyword(self, keyword: str) -> Optional[Project]:
        """Project with the given keyword, or None."""
        return next((p for p in self._items if p.keyword == keyword), None)

    def archived(self) -> "Projects":
        return self.filter(lambda p: p.archived)

    def active(self) -> "Projects":
        return self.filter(lambda p: not p.archived)


class Stories(EntityCollection[Story]):
    """A collection of stories, in the order the API returned them."""

    @classmethod
    def from_raw(cls, records: Iterable[Mapping], data_store=None, **overrides) -> "Stories":
        """Convert raw API records into a collection. Aborts on the first bad record."""
        return cls(Story.from_raw(record, data_store=data_store, **overrides) for record in records)

    def started(self) -> "Stories":
        return self.filter(lambda s: s.is_started)

    def unstarted(self) -> "Stories":
        return self.filter(lambda s: s.is_unstarted)

    def not_completed(self) -> "Stories":
        """Stories not yet finished, delivered or accepted."""
        return self.filter(lambda s: not s.is_completed)

    def completed(self) -> "Stories":
        return self.filter(lambda s: s.is_completed)

    def in_iteration(self, iteration: Iteration) -> "Stories":
        return self.filter(lambda s: s.in_iteration(iteration))

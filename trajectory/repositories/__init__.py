"""
Repository layer - fetching and caching of remote records.

Usage:
    from trajectory.repositories import get_data_store

    store = get_data_store()  # Process-wide store over the HTTP API
    projects = store.fetch_projects()
    stories = projects.find_by_keyword("website").stories()

Code that needs its own source (tests, scripts) builds a DataStore
directly and passes it along.
"""

import threading
from typing import Optional

from .base import RemoteSource
from .data_store import DataStore
from .http_source import HttpRemoteSource

_instance: Optional[DataStore] = None
_instance_lock = threading.Lock()


def get_data_store() -> DataStore:
    """Get the process-wide data store, creating it on first use."""
    global _instance

    with _instance_lock:
        if _instance is None:
            _instance = DataStore(HttpRemoteSource())
        return _instance


def configure_data_store(source: Optional[RemoteSource] = None) -> None:
    """Replace the process-wide store. None resets it to the HTTP default."""
    global _instance
    with _instance_lock:
        _instance = DataStore(source) if source is not None else None


__all__ = [
    "get_data_store",
    "configure_data_store",
    "DataStore",
    "RemoteSource",
    "HttpRemoteSource",
]

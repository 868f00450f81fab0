"""
Process-wide store instance management
"""

import threading

from ..logging import get_logger
from .repository import DataStore

logger = get_logger(__name__)

_store: DataStore | None = None
_init_lock = threading.Lock()


def init_store(force_reinit: bool = False) -> DataStore:
    """Create the shared store if it does not exist yet.

    Thread-safe: concurrent callers all receive the same instance.
    """
    global _store

    if _store is not None and not force_reinit:
        return _store

    with _init_lock:
        if _store is None or force_reinit:
            _store = DataStore()
            logger.info("In-memory store initialized")
        return _store


def get_store() -> DataStore:
    """Get the shared store, initializing it on first use."""
    if _store is None:
        return init_store()
    return _store


def reset_store() -> None:
    """Drop the shared store (for tests)."""
    global _store
    _store = None

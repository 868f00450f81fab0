"""
In-memory storage for users and posts
"""

from .entity_store import EntityStore
from .models import PostRecord, UserRecord
from .repository import DataStore
from .state import get_store, init_store, reset_store

__all__ = [
    "DataStore",
    "EntityStore",
    "PostRecord",
    "UserRecord",
    "get_store",
    "init_store",
    "reset_store",
]

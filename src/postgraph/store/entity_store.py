"""
Thread-safe key-value store for a single entity type
"""

import threading
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class EntityStore(Generic[K, V]):
    """In-memory map of id to entity.

    Reads and single-key writes are guarded by a store-wide lock. ``update``
    additionally holds a per-key lock across its read-modify-write so that
    concurrent updates of the same entity are serialized while updates of
    different entities proceed independently.
    """

    def __init__(self, name: str):
        self.name = name
        self._entities: dict[K, V] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[K, threading.Lock] = {}

    def put(self, key: K, entity: V) -> None:
        with self._lock:
            self._entities[key] = entity

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._entities.get(key)

    def get_many(self, keys: Iterable[K]) -> list[V | None]:
        """Look up several keys at once; missing keys come back as None in place."""
        with self._lock:
            return [self._entities.get(key) for key in keys]

    def update(self, key: K, fn: Callable[[V], V]) -> V | None:
        """Atomically replace the entity at ``key`` with ``fn(current)``.

        Returns the new entity, or None if ``key`` is absent (nothing is written).
        """
        with self._key_lock(key):
            current = self.get(key)
            if current is None:
                return None
            updated = fn(current)
            self.put(key, updated)
            return updated

    def values(self) -> list[V]:
        """Snapshot of all entities in insertion order."""
        with self._lock:
            return list(self._entities.values())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entities

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def _key_lock(self, key: K) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

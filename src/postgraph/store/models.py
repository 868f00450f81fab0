"""
Records held by the in-memory store
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserRecord:
    """A stored user. ``post_ids`` is in creation order and only ever grows."""

    id: str
    name: str
    age: int
    post_ids: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class PostRecord:
    """A stored post. ``created_at`` is kept exactly as supplied."""

    id: str
    title: str
    content: str
    created_at: str

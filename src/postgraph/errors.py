"""
Error types raised by the store, loaders and pagination
"""

from collections.abc import Sequence
from typing import Any


class PostgraphError(Exception):
    """Base exception for postgraph operations."""

    pass


class InvalidPage(PostgraphError):
    """Raised when a page number is below 1."""

    def __init__(self, page_number: int):
        self.page_number = page_number
        super().__init__(f"Invalid page number {page_number}: pages are numbered from 1")


class InvalidPageSize(PostgraphError):
    """Raised when a page size is zero or negative."""

    def __init__(self, page_size: int):
        self.page_size = page_size
        super().__init__(f"Invalid page size {page_size}: page size must be positive")


class UserNotFound(PostgraphError):
    """Raised when a mutation references a user that does not exist."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class BatchFetchFailure(PostgraphError):
    """Raised to every waiter of a batch whose fetch function failed."""

    def __init__(self, loader_name: str, keys: Sequence[Any]):
        self.loader_name = loader_name
        self.keys = list(keys)
        super().__init__(f"Batch fetch failed in {loader_name} loader for {len(self.keys)} key(s)")

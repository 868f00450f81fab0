"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from postgraph.graphql.context import build_context
from postgraph.store import DataStore, reset_store


@pytest.fixture
def store() -> DataStore:
    """A fresh, empty store."""
    return DataStore()


@pytest.fixture
def make_context(store: DataStore):
    """Build a GraphQL context over the test store; each call is a new operation."""

    def _make() -> dict[str, Any]:
        return build_context(store=store)

    return _make


@pytest.fixture(autouse=True)
def reset_shared_store() -> Generator[None, None, None]:
    """Make sure no test sees the process-wide store of another."""
    reset_store()
    yield
    reset_store()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)

"""
Per-operation GraphQL context shared by resolvers
"""

from typing import Any

import strawberry

from ..store import DataStore, get_store
from .loaders import Loaders


def build_context(request: Any = None, store: DataStore | None = None) -> dict[str, Any]:
    """Build the context for one GraphQL operation.

    A fresh Loaders scope is created every time so that loader caches never
    outlive the operation they were built for.
    """
    store = store or get_store()
    return {
        "request": request,
        "store": store,
        "loaders": Loaders(store),
    }


def get_store_from_info(info: strawberry.Info) -> DataStore:
    return info.context["store"]


def get_loaders_from_info(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import TYPE_CHECKING, TypeVar

from strawberry.dataloader import DataLoader

from ..errors import BatchFetchFailure
from ..logging import get_logger

if TYPE_CHECKING:
    from ..store import DataStore, PostRecord, UserRecord

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = get_logger(__name__)


class BatchLoader(DataLoader[K, V | None]):
    """DataLoader over a synchronous batch-fetch function.

    Every ``load`` issued during one event-loop tick is collected into a single
    batch, keys are deduplicated through the loader cache, and the fetch
    function runs once per batch. Missing keys resolve to None. When the fetch
    function raises, all waiters of that batch receive the same
    BatchFetchFailure and the failed keys are dropped from the cache.
    """

    def __init__(
        self,
        name: str,
        fetch_many: Callable[[list[K]], Sequence[V | None]],
        max_batch_size: int | None = None,
    ):
        self.name = name
        self.dispatch_count = 0
        self._fetch_many = fetch_many
        super().__init__(load_fn=self._dispatch, max_batch_size=max_batch_size)

    async def _dispatch(self, keys: list[K]) -> list[V | None]:
        self.dispatch_count += 1
        logger.debug("Dispatching batch", loader=self.name, key_count=len(keys))
        try:
            values = list(self._fetch_many(keys))
        except Exception as e:
            logger.error("Batch fetch failed", loader=self.name, key_count=len(keys), error=str(e))
            self._evict_pending(keys)
            raise BatchFetchFailure(self.name, keys) from e
        return values

    def _evict_pending(self, keys: list[K]) -> None:
        # A key may have been cleared or primed since it joined this batch
        for key in keys:
            future = self.cache_map.get(key)
            if future is not None and not future.done():
                self.cache_map.delete(key)


class Loaders:
    """Loaders for one GraphQL operation. Create a new instance per request."""

    def __init__(self, store: DataStore):
        self.user_loader: BatchLoader[str, UserRecord] = BatchLoader(
            "users", store.users.get_many
        )
        self.post_loader: BatchLoader[str, PostRecord] = BatchLoader(
            "posts", store.posts.get_many
        )

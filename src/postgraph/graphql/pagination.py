"""
Page-number pagination over ordered id sequences
"""

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from strawberry.dataloader import DataLoader

from ..errors import InvalidPage, InvalidPageSize

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Page(Generic[K]):
    """The ids of one page and whether pages exist on either side of it."""

    ids: list[K]
    has_next_page: bool
    has_previous_page: bool


@dataclass(frozen=True)
class LoadedPage(Generic[K, V]):
    """A page whose ids have been resolved to entities, in page order."""

    page: Page[K]
    entities: list[V | None]

    def items(self) -> list[tuple[K, V | None]]:
        return list(zip(self.page.ids, self.entities))


def paginate(
    ordered_ids: Sequence[K], page_number: int, page_size: int = DEFAULT_PAGE_SIZE
) -> Page[K]:
    """Slice page ``page_number`` (1-based) of ``page_size`` ids out of ``ordered_ids``.

    A page past the end is empty rather than an error.

    Raises:
        InvalidPage: If page_number is below 1
        InvalidPageSize: If page_size is zero or negative
    """
    if page_number < 1:
        raise InvalidPage(page_number)
    if page_size <= 0:
        raise InvalidPageSize(page_size)

    total = len(ordered_ids)
    start = (page_number - 1) * page_size
    if start >= total:
        return Page(ids=[], has_next_page=False, has_previous_page=start > 0)

    end = min(start + page_size, total)
    return Page(
        ids=list(ordered_ids[start:end]),
        has_next_page=end < total,
        has_previous_page=start > 0,
    )


async def load_page(
    loader: DataLoader[K, V | None],
    ordered_ids: Sequence[K],
    page_number: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> LoadedPage[K, V]:
    """Paginate ``ordered_ids`` and fetch the page's entities through ``loader``."""
    page = paginate(ordered_ids, page_number, page_size)
    entities = await loader.load_many(page.ids) if page.ids else []
    return LoadedPage(page=page, entities=list(entities))

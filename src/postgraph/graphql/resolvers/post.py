from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_loaders_from_info, get_store_from_info
from ..pagination import load_page

if TYPE_CHECKING:
    from ...store import PostRecord
    from ..types.pagination import PostConnection
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


def to_post_type(record: PostRecord) -> Post:
    from ..types.post import Post as PostType

    return PostType(
        id=strawberry.ID(record.id),
        title=record.title,
        content=record.content,
        created_at=record.created_at,
    )


async def build_post_connection(
    info: strawberry.Info, post_ids: Sequence[str], page_number: int, page_size: int
) -> PostConnection:
    """Paginate ``post_ids`` and load the posts of the requested page."""
    from ..types.pagination import PageInfo, PostConnection, PostEdge

    loaded = await load_page(
        get_loaders_from_info(info).post_loader, post_ids, page_number, page_size
    )

    edges = []
    for post_id, record in loaded.items():
        if record is None:
            logger.warning("Post referenced by user is missing", post_id=post_id)
            continue
        edges.append(PostEdge(cursor=post_id, node=to_post_type(record)))

    return PostConnection(
        edges=edges,
        page_info=PageInfo(
            has_next_page=loaded.page.has_next_page,
            has_previous_page=loaded.page.has_previous_page,
        ),
    )


# Query resolvers
async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post | None:
    record = await get_loaders_from_info(info).post_loader.load(id)
    if record is None:
        return None
    return to_post_type(record)


async def resolve_user_posts(
    info: strawberry.Info, user_id: str, page_number: int, page_size: int
) -> PostConnection:
    """Resolve a page of posts for the user with ``user_id``.

    An unknown user yields an empty connection. Page arguments are still
    validated so that bad input is reported the same way for every user.
    """
    user = await get_loaders_from_info(info).user_loader.load(user_id)
    post_ids = user.post_ids if user is not None else ()
    if user is None:
        logger.info("Posts requested for unknown user", user_id=user_id)
    return await build_post_connection(info, post_ids, page_number, page_size)


# Field resolvers
async def resolve_user_posts_connection(
    user: User, info: strawberry.Info, page_number: int, page_size: int
) -> PostConnection:
    return await build_post_connection(info, user.post_ids, page_number, page_size)


# Mutation resolvers
async def create_post(
    info: strawberry.Info, user_id: str, title: str, content: str, created_at: str
) -> Post:
    """Create a post owned by ``user_id``.

    Raises:
        UserNotFound: If the user does not exist
    """
    store = get_store_from_info(info)
    record = store.create_post(user_id, title, content, created_at)

    loaders = get_loaders_from_info(info)
    loaders.post_loader.prime(record.id, record)
    # Replace any copy of the owner cached earlier in this operation
    owner = store.users.get(user_id)
    if owner is not None:
        loaders.user_loader.prime(user_id, owner, force=True)
    return to_post_type(record)

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_loaders_from_info, get_store_from_info

if TYPE_CHECKING:
    from ...store import UserRecord
    from ..types.user import User

logger = get_logger(__name__)


def to_user_type(record: UserRecord) -> User:
    from ..types.user import User as UserType

    return UserType(
        id=strawberry.ID(record.id),
        name=record.name,
        age=record.age,
        post_ids=record.post_ids,
    )


# Query resolvers
async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    """Resolve a user by ID through the operation's user loader."""
    record = await get_loaders_from_info(info).user_loader.load(id)
    if record is None:
        logger.info("User not found", user_id=id)
        return None
    return to_user_type(record)


async def resolve_users(info: strawberry.Info) -> list[User]:
    """Resolve all users in creation order."""
    store = get_store_from_info(info)
    loaders = get_loaders_from_info(info)
    records = store.users.values()
    for record in records:
        loaders.user_loader.prime(record.id, record)
    return [to_user_type(record) for record in records]


# Mutation resolvers
async def create_user(info: strawberry.Info, name: str, age: int) -> User:
    """Create a user with no posts."""
    record = get_store_from_info(info).create_user(name, age)
    get_loaders_from_info(info).user_loader.prime(record.id, record)
    return to_user_type(record)

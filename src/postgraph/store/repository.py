"""Users and posts store with the mutation handlers that write to it."""

from __future__ import annotations

import dataclasses
import uuid

from ..errors import UserNotFound
from ..logging import get_logger
from .entity_store import EntityStore
from .models import PostRecord, UserRecord

logger = get_logger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


class DataStore:
    """The two entity stores of the service and the operations that write to them."""

    def __init__(self) -> None:
        self.users: EntityStore[str, UserRecord] = EntityStore("users")
        self.posts: EntityStore[str, PostRecord] = EntityStore("posts")

    def create_user(self, name: str, age: int) -> UserRecord:
        user = UserRecord(id=new_id(), name=name, age=age)
        self.users.put(user.id, user)
        logger.info("User created", user_id=user.id)
        return user

    def create_post(self, user_id: str, title: str, content: str, created_at: str) -> PostRecord:
        """Create a post and append its id to the owning user's post sequence.

        Raises:
            UserNotFound: If ``user_id`` is not a stored user
        """
        if user_id not in self.users:
            logger.info("Post creation for unknown user", user_id=user_id)
            raise UserNotFound(user_id)

        post = PostRecord(id=new_id(), title=title, content=content, created_at=created_at)
        self.posts.put(post.id, post)

        owner = self.users.update(
            user_id,
            lambda user: dataclasses.replace(user, post_ids=user.post_ids + (post.id,)),
        )
        if owner is None:
            raise UserNotFound(user_id)

        logger.info("Post created", post_id=post.id, user_id=user_id)
        return post

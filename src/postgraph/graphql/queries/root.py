"""
Root GraphQL query definitions
"""

import strawberry

from ...config import settings
from ..types.pagination import PostConnection
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def get_user(self, info: strawberry.Info, id: strawberry.ID) -> User | None:
        """Get a user by ID."""
        from ..resolvers.user import resolve_user_by_id

        return await resolve_user_by_id(info, str(id))

    @strawberry.field
    async def get_users(self, info: strawberry.Info) -> list[User]:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def get_user_posts(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        page_number: int,
        page_size: int = settings.default_page_size,
    ) -> PostConnection:
        """Get one page of a user's posts, oldest first."""
        from ..resolvers.post import resolve_user_posts

        return await resolve_user_posts(info, str(user_id), page_number, page_size)

    @strawberry.field
    async def get_post(self, info: strawberry.Info, id: strawberry.ID) -> Post | None:
        """Get a post by ID."""
        from ..resolvers.post import resolve_post_by_id

        return await resolve_post_by_id(info, str(id))

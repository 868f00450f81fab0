"""
User GraphQL type definitions
"""

import strawberry

from ...config import settings
from .pagination import PostConnection


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    age: int
    post_ids: strawberry.Private[tuple[str, ...]]

    @strawberry.field
    async def posts(
        self,
        info: strawberry.Info,
        page_number: int = 1,
        page_size: int = settings.default_page_size,
    ) -> PostConnection:
        """Get one page of this user's posts, oldest first."""
        from ..resolvers.post import resolve_user_posts_connection

        return await resolve_user_posts_connection(self, info, page_number, page_size)

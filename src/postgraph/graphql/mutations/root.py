"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.post import Post
from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, name: str, age: int) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, name, age)

    @strawberry.mutation(name="createPost")
    async def create_post(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        title: str,
        content: str,
        created_at: str,
    ) -> Post:
        """Create a post for an existing user."""
        from ..resolvers.post import create_post

        return await create_post(info, str(user_id), title, content, created_at)

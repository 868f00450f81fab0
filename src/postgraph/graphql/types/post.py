"""
Post GraphQL type definitions
"""

import strawberry


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str
    content: str
    created_at: str

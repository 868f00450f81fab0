"""
Connection types for paginated post lists
"""

import strawberry

from .post import Post


@strawberry.type
class PageInfo:
    """Whether pages exist before and after the current one."""

    has_next_page: bool
    has_previous_page: bool


@strawberry.type
class PostEdge:
    """A post together with its pagination cursor."""

    cursor: str
    node: Post


@strawberry.type
class PostConnection:
    """One page of posts."""

    edges: list[PostEdge]
    page_info: PageInfo

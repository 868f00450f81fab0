"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails validation at startup."""

    pass


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast.

    Raises:
        SchemaValidationError: If the schema is invalid
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        messages = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=messages)
        raise SchemaValidationError(f"GraphQL schema validation failed: {messages}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        messages = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {messages}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers, with fresh loaders per request."""
        return build_context(request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )

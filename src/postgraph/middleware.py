"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import get_logger, request_context

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name_from_payload(operation_name: object, query: object) -> str | None:
    """Derive a loggable operation name from a GraphQL payload.

    Prefers the explicit ``operationName``; otherwise takes the name of the
    first named operation in the document, prefixed with ``mutation:`` for
    mutations.
    """
    if isinstance(operation_name, str) and operation_name:
        return operation_name
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind, name = match.groups()
        return f"mutation:{name}" if kind == "mutation" else name
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        params = request.query_params
        return operation_name_from_payload(params.get("operationName"), params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return operation_name_from_payload(data.get("operationName"), data.get("query"))

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        graphql_operation = await extract_graphql_operation_name(request)

        with request_context(operation_name=graphql_operation) as request_id:
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed", method=request.method, path=request.url.path, error=str(e)
                )
                raise

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )
            response.headers["X-Request-ID"] = request_id
            return response
#!/usr/bin/env python3
"""
Main CLI entry point for the postgraph server.
"""

import asyncio
import json
import os
import sys

import click
import uvicorn

from postgraph import __version__
from postgraph.config import settings
from postgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEMO_QUERY = """
query DemoUsers($pageNumber: Int!, $pageSize: Int!) {
  getUsers {
    id
    name
    posts(pageNumber: $pageNumber, pageSize: $pageSize) {
      edges { cursor node { title createdAt } }
      pageInfo { hasNextPage hasPreviousPage }
    }
  }
}
"""


@click.group()
@click.version_option(version=__version__, prog_name="postgraph")
def cli() -> None:
    """postgraph CLI - run the GraphQL server."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, show_default=True, help="Port to bind to")
@click.option(
    "--reload", is_flag=True, default=settings.api_reload, help="Enable auto-reload for development"
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the postgraph API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting postgraph API server", host=host, port=port, reload=reload)

    # The app reads these when it is imported by uvicorn
    if log_level == "debug":
        os.environ["POSTGRAPH_DEBUG"] = "true"
    else:
        os.environ.setdefault("POSTGRAPH_DEBUG", "false")
    os.environ.setdefault("POSTGRAPH_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "postgraph.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option("--users", "user_count", default=2, type=int, help="Users to create")
@click.option("--posts-per-user", default=12, type=int, help="Posts to create for each user")
@click.option("--page-number", default=1, type=int, help="Page of posts to show (1-based)")
@click.option("--page-size", default=10, type=int, help="Posts per page")
def demo(user_count: int, posts_per_user: int, page_number: int, page_size: int) -> None:
    """Seed a throwaway store and print one page of every user's posts."""
    from postgraph.graphql.context import build_context
    from postgraph.graphql.schema import schema
    from postgraph.store import DataStore

    configure_logging()

    store = DataStore()
    for u in range(user_count):
        user = store.create_user(f"user-{u + 1}", 20 + u)
        for p in range(posts_per_user):
            store.create_post(
                user.id,
                f"Post {p + 1} by {user.name}",
                f"Content of post {p + 1}",
                f"2024-01-{(p % 28) + 1:02d}T00:00:00Z",
            )

    async def run_query():
        return await schema.execute(
            DEMO_QUERY,
            variable_values={"pageNumber": page_number, "pageSize": page_size},
            context_value=build_context(store=store),
        )

    result = asyncio.run(run_query())

    if result.errors:
        for error in result.errors:
            click.echo(f"✗ {error.message}", err=True)
        sys.exit(1)

    click.echo(json.dumps(result.data, indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

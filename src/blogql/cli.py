#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--no-seed",
    is_flag=True,
    default=False,
    help="Start with an empty store instead of the sample data",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    log_level: str,
    no_seed: bool,
) -> None:
    """Start the blogql API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting blogql API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        seed_data=not no_seed,
    )

    # Picked up by the reloader's child process when it imports the app
    if log_level == "debug":
        os.environ["BLOGQL_DEBUG"] = "true"
        os.environ["BLOGQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BLOGQL_DEBUG", "false")
        os.environ.setdefault("BLOGQL_LOG_LEVEL", log_level)
    if no_seed:
        os.environ["BLOGQL_SEED_DATA"] = "false"

    try:
        if reload:
            uvicorn.run(
                "blogql.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from blogql.api.app import create_app
            from blogql.store import EntityStore

            app = create_app(store=EntityStore()) if no_seed else create_app()

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL."""
    from blogql.graphql.schema import print_schema

    click.echo(print_schema())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Main CLI entry point for the Bandstand server.
"""

import json
import os
import sys

import click
import uvicorn

from bandstand import __version__
from bandstand.config import settings
from bandstand.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bandstand")
def cli() -> None:
    """Bandstand CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=click.IntRange(0, 65535),
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error", "critical"]),
    show_default=True,
    help="Log level",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Bandstand API server."""

    configure_logging(debug=(settings.debug or log_level == "debug"), level=log_level)

    logger.info(
        "Starting Bandstand API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Importing the app configures logging from settings, and worker and reload
    # processes re-import it, so pass the choices through settings and the environment
    settings.log_level = log_level.upper()
    os.environ["BANDSTAND_API_HOST"] = host
    os.environ["BANDSTAND_API_PORT"] = str(port)
    os.environ["BANDSTAND_LOG_LEVEL"] = log_level
    if log_level == "debug":
        settings.debug = True
        os.environ["BANDSTAND_DEBUG"] = "true"

    try:
        if reload or workers > 1:
            uvicorn.run(
                "bandstand.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from bandstand.api.app import app

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
    """Print the GraphQL schema in SDL form."""
    from bandstand.graphql.schema import print_schema

    click.echo(print_schema())


@cli.command()
@click.option(
    "--output-format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format (default: table)",
)
def players(output_format: str) -> None:
    """List the player roster."""
    from bandstand.players import PlayerStore

    store = PlayerStore.from_seed()

    if output_format == "json":
        rows = [
            {"id": p.id, "name": p.name, "instrument": p.instrument.name} for p in store.list()
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    click.echo(f"Found {len(store)} player(s):")
    click.echo()
    for p in store.list():
        click.echo(f"  {p.id}  {p.name:<10} {p.instrument.name}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()

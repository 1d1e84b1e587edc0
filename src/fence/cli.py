#!/usr/bin/env python3
"""
Main CLI entry point for the Fence server.
"""

import os
import sys

import click
import uvicorn

from fence import __version__
from fence.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="fence")
def cli() -> None:
    """Fence CLI - run the DinoPark profile API."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8085, type=int, help="Port to bind to (default: 8085)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Fence API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info("Starting Fence API server", host=host, port=port, reload=reload)

    # The app reads its settings from the environment when uvicorn imports it
    os.environ["FENCE_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["FENCE_DEBUG"] = "true"

    try:
        uvicorn.run(
            "fence.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

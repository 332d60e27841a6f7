"""Command line entry point for the Obsidian notes MCP server."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from obsidian_notes import __version__
from obsidian_notes.config import VALID_LOG_LEVELS, load_server_configuration
from obsidian_notes.server import run_server

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the MCP stream."""
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("vault_path")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with 'exclude' patterns and 'log_level'.",
)
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.version_option(__version__, prog_name="obsidian-notes-mcp")
def main(vault_path: str, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """Expose the Obsidian vault at VAULT_PATH over MCP on stdio."""
    try:
        settings = load_server_configuration(vault_path, config_path, log_level)
    except (FileNotFoundError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc

    configure_logging(settings.log_level)

    try:
        asyncio.run(run_server(settings, version=__version__))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()

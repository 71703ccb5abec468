"""
gqlens CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
import sys
from pathlib import Path

import click

from ..config import SettingsError, load_settings
from .commands import parse, show, tokens
from .utils import echo_error


@click.group()
@click.version_option(package_name="gqlens")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (default: .gqlens.yaml if present)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None):
    """gqlens: Collapsible, searchable outlines of GraphQL operations.

    \b
    Quick Start:
      gqlens show query.graphql
      gqlens show query.graphql --search email
      cat query.graphql | gqlens parse --json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(Path(config_path) if config_path else None)
    except SettingsError as e:
        echo_error(str(e))
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# Register commands
main.add_command(tokens.tokens)
main.add_command(parse.parse)
main.add_command(show.show)

if __name__ == "__main__":
    main()

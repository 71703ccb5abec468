"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, document loading and argument conversion used across
the gqlens commands.
"""

import logging
from typing import IO, Tuple

import click

from ..parsing.base import ParseResult

logger = logging.getLogger(__name__)


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def read_document(stream: IO[str], max_bytes: int) -> str:
    """
    Read a document from an open text stream, truncating oversized input.

    Args:
        stream: File or stdin stream opened by click.
        max_bytes (int): Largest number of bytes kept.

    Returns:
        str: The (possibly truncated) document text.
    """
    text = stream.read()
    encoded = text.encode("utf-8")
    if len(encoded) > max_bytes:
        echo_warning(f"Document is {len(encoded)} bytes; only the first {max_bytes} are parsed")
        text = encoded[:max_bytes].decode("utf-8", errors="ignore")
    logger.debug(f"Read {len(text)} characters from {getattr(stream, 'name', '<stream>')}")
    return text


def parse_path(value: str) -> Tuple[int, ...]:
    """
    Convert a dotted structural path such as ``0.2.1`` into a tuple.

    Raises:
        click.BadParameter: If any part is not a non-negative integer.
    """
    try:
        path = tuple(int(part) for part in value.split("."))
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a dotted path like 0.1.2")
    if any(index < 0 for index in path):
        raise click.BadParameter(f"'{value}' contains a negative index")
    return path


def echo_diagnostics(result: ParseResult) -> None:
    for diagnostic in result.diagnostics:
        echo_warning(f"{diagnostic.kind}: {diagnostic.message}")

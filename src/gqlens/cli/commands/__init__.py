"""
CLI command modules for gqlens.
"""

from . import parse, show, tokens

__all__ = ["parse", "show", "tokens"]

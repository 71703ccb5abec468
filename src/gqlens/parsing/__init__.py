"""
GraphQL parsing module for gqlens.

Provides:
- tokenize: raw text to tokens
- parse: tokens to a forest of definitions
- parse_document: both steps plus diagnostics
"""

from .base import DiagnosticKind, ParseDiagnostic, ParseResult
from .cursor import Cursor
from .engine import parse_document
from .lexer import tokenize
from .parser import parse, parse_forest

__all__ = [
    "Cursor",
    "DiagnosticKind",
    "ParseDiagnostic",
    "ParseResult",
    "parse",
    "parse_document",
    "parse_forest",
    "tokenize",
]

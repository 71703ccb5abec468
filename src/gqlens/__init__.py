"""
gqlens - Interactive outlines for captured GraphQL operations.

Turns a captured GraphQL document into a collapsible, searchable outline
without a schema or a full grammar. Malformed input never raises; it simply
yields a smaller (possibly empty) forest.

Key Components:
- parsing: lexer, structural parser and diagnostics
- render: toolbar state, per-node outline state, rows and rich output
- core: node model

Usage:
    from gqlens import OutlineViewer

    viewer = OutlineViewer("query GetUser($id: ID!) { user(id: $id) { name } }")
    viewer.toolbar.toggle_search()
    viewer.toolbar.set_search_term("name")
    rows = viewer.rows()
"""

__version__ = "0.1.0"

from .core.types import (
    Argument, Directive, Node, NodeKind, OperationType, VariableDefinition,
)
from .parsing import ParseResult, parse, parse_document, tokenize
from .render import (
    OutlineState, OutlineViewer, Row, Toolbar, ToolbarState,
    derive_rows, render_outline,
)

__all__ = [
    "__version__",
    "Argument",
    "Directive",
    "Node",
    "NodeKind",
    "OperationType",
    "VariableDefinition",
    "ParseResult",
    "parse",
    "parse_document",
    "tokenize",
    "OutlineState",
    "OutlineViewer",
    "Row",
    "Toolbar",
    "ToolbarState",
    "derive_rows",
    "render_outline",
]

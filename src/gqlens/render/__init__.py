"""
Outline rendering for gqlens.

Provides:
- Toolbar / ToolbarState: expand-all, collapse-all and search controls
- OutlineState / derive_rows: per-node state and visible rows
- OutlineViewer: one document bound to its toolbar and state
- render_outline: rich terminal output
"""

from .console import build_tree, render_lines, render_outline
from .outline import (
    OutlineState,
    Role,
    Row,
    Segment,
    Toggle,
    build_header,
    derive_rows,
    find_matches,
)
from .toolbar import Toolbar, ToolbarState
from .viewer import OutlineViewer

__all__ = [
    "OutlineState",
    "OutlineViewer",
    "Role",
    "Row",
    "Segment",
    "Toggle",
    "Toolbar",
    "ToolbarState",
    "build_header",
    "build_tree",
    "derive_rows",
    "find_matches",
    "render_lines",
    "render_outline",
]

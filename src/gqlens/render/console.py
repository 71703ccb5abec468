"""
Terminal rendering of outline rows with rich.

Two layouts are offered: a brace outline that mirrors the document (with
closing braces under open nodes) and a rich ``Tree`` with guide lines.
"""

from typing import Iterable, List

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from ..config import ViewerSettings
from .outline import Row

OPEN_MARKER = "▾ "
CLOSED_MARKER = "▸ "
LEAF_MARKER = "  "


def row_text(row: Row, settings: ViewerSettings, indent: bool = True) -> Text:
    """Build the styled text of a single row."""
    text = Text()
    if indent:
        text.append(" " * (row.depth * settings.indent_width))
    if row.has_children:
        text.append(OPEN_MARKER if row.is_open else CLOSED_MARKER, style="grey50")
    elif indent:
        text.append(LEAF_MARKER)

    for segment in row.segments:
        style = settings.style_for(segment.role)
        if segment.highlighted:
            style = f"{style} {settings.highlight_style}".strip()
        text.append(segment.text, style=style)
    return text


def render_lines(rows: Iterable[Row], settings: ViewerSettings | None = None) -> List[Text]:
    """
    Lay rows out as a brace outline.

    A closing brace is emitted once every open node's subtree has ended.
    """
    settings = settings or ViewerSettings()
    closing_style = settings.style_for("punctuation")
    lines: List[Text] = []
    open_depths: List[int] = []

    def close_until(depth: int) -> None:
        while open_depths and open_depths[-1] >= depth:
            closed = open_depths.pop()
            pad = " " * (closed * settings.indent_width + len(LEAF_MARKER))
            lines.append(Text(pad) + Text("}", style=closing_style))

    for row in rows:
        close_until(row.depth)
        lines.append(row_text(row, settings))
        if row.has_children and row.is_open:
            open_depths.append(row.depth)
    close_until(0)
    return lines


def build_tree(rows: Iterable[Row], label: str, settings: ViewerSettings | None = None) -> Tree:
    """Arrange rows under a rich ``Tree`` using their depth."""
    settings = settings or ViewerSettings()
    tree = Tree(Text(label, style="bold"))
    branches: List[Tree] = [tree]
    for row in rows:
        del branches[row.depth + 1:]
        branch = branches[-1].add(row_text(row, settings, indent=False))
        branches.append(branch)
    return tree


def render_outline(
    rows: Iterable[Row],
    console: Console | None = None,
    settings: ViewerSettings | None = None,
    as_tree: bool = False,
    label: str = "GraphQL Query",
) -> None:
    console = console or Console()
    if as_tree:
        console.print(build_tree(rows, label, settings))
        return
    for line in render_lines(rows, settings):
        console.print(line, soft_wrap=True)

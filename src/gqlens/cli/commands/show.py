"""
Show Command - Render a document as a collapsible outline.

Toolbar gestures are replayed in a fixed order: collapse-all or expand-all,
then individual toggles, then the search term.
"""

import click
from rich.console import Console

from ...render.console import render_outline
from ...render.viewer import OutlineViewer
from ..utils import echo_diagnostics, parse_path, read_document


def _paths(ctx, param, values):
    return [parse_path(value) for value in values]


@click.command()
@click.argument("document", type=click.File("r"), default="-")
@click.option("-s", "--search", "search_term", default="", help="Highlight and expand matches (case-sensitive)")
@click.option("--collapse-all", is_flag=True, help="Collapse every node before applying toggles")
@click.option(
    "-t",
    "--toggle",
    "toggles",
    multiple=True,
    callback=_paths,
    help="Toggle the node at a dotted path, e.g. 0.1 (repeatable)",
)
@click.option("--tree", "as_tree", is_flag=True, help="Draw with tree guide lines instead of braces")
@click.pass_context
def show(ctx: click.Context, document, search_term: str, collapse_all: bool, toggles, as_tree: bool):
    """
    Show a GraphQL document as an outline (use - for stdin).
    """
    settings = ctx.obj["settings"]
    viewer = OutlineViewer(read_document(document, settings.max_document_bytes))

    if viewer.is_empty:
        # Nothing recognised: show the text exactly as captured
        click.echo(viewer.copy_text())
        echo_diagnostics(viewer.result)
        return

    toolbar = viewer.toolbar
    if collapse_all:
        toolbar.collapse_all()
    for path in toggles:
        viewer.toggle(path)
    if search_term:
        toolbar.toggle_search()
        toolbar.set_search_term(search_term)

    render_outline(viewer.rows(), console=Console(), settings=settings, as_tree=as_tree)

"""
Parse Command - Print the structural forest of a document.

Outputs the forest as JSON (absent lists omitted) or a short summary with
any diagnostics.
"""

import json

import click

from ...core.types import NodeKind
from ...parsing.engine import parse_document
from ..utils import echo_diagnostics, echo_info, echo_success, read_document


@click.command()
@click.argument("document", type=click.File("r"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Output the forest and diagnostics as JSON")
@click.pass_context
def parse(ctx: click.Context, document, as_json: bool):
    """
    Parse a GraphQL document into operations and fragments.
    """
    settings = ctx.obj["settings"]
    result = parse_document(read_document(document, settings.max_document_bytes))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    echo_success(f"Parsed {len(result.tokens)} tokens into {len(result.forest)} definition(s)")
    for root in result.forest:
        fields = sum(1 for node in root.walk() if node.kind == NodeKind.FIELD)
        label = root.operation_type or "fragment"
        echo_info(f"{label} {root.name or '(anonymous)'}: {fields} field(s)")
    echo_diagnostics(result)

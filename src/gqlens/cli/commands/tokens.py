"""
Tokens Command - Print the lexer output for a document.
"""

import json

import click

from ...parsing.lexer import tokenize
from ..utils import read_document


@click.command()
@click.argument("document", type=click.File("r"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Output tokens as a JSON array")
@click.pass_context
def tokens(ctx: click.Context, document, as_json: bool):
    """
    Tokenize a GraphQL document (use - for stdin).
    """
    settings = ctx.obj["settings"]
    text = read_document(document, settings.max_document_bytes)
    result = tokenize(text)

    if as_json:
        click.echo(json.dumps(result))
        return

    for token in result:
        click.echo(token)

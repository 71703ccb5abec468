"""
Parser Engine for gqlens.

Single entry point that runs the lexer and the structural parser over a
document and collects diagnostics. Like the parser it wraps, the engine never
raises for any input text.
"""

import logging
from typing import List

from .base import DiagnosticKind, ParseDiagnostic, ParseResult
from .lexer import is_unterminated_literal, tokenize
from .parser import MAX_NESTING_DEPTH, parse_forest

logger = logging.getLogger(__name__)


def parse_document(text: str) -> ParseResult:
    """
    Tokenize and parse a captured operation document.

    The document is parsed from scratch on every call; nothing is cached.

    Args:
        text (str): Raw operation text, possibly malformed.

    Returns:
        ParseResult: Tokens, forest and non-fatal diagnostics.
    """
    tokens = tokenize(text)
    forest, skipped = parse_forest(tokens)
    diagnostics = collect_diagnostics(text, tokens, len(forest), skipped)

    for diagnostic in diagnostics:
        logger.debug(f"{diagnostic.kind}: {diagnostic.message}")
    logger.debug(f"Parsed {len(tokens)} tokens into {len(forest)} definitions")

    return ParseResult(text=text, tokens=tokens, forest=forest, diagnostics=diagnostics)


def collect_diagnostics(
    text: str, tokens: List[str], definitions: int, skipped: List[int]
) -> List[ParseDiagnostic]:
    diagnostics: List[ParseDiagnostic] = []

    if tokens and is_unterminated_literal(tokens[-1]):
        diagnostics.append(
            ParseDiagnostic(
                message="String literal is not terminated",
                kind=DiagnosticKind.UNTERMINATED_STRING,
                token_index=len(tokens) - 1,
            )
        )

    balance = 0
    deepest = 0
    for token in tokens:
        if token == "{":
            balance += 1
            deepest = max(deepest, balance)
        elif token == "}":
            balance -= 1
    if balance != 0:
        diagnostics.append(
            ParseDiagnostic(
                message=f"Braces are unbalanced ({balance:+d})",
                kind=DiagnosticKind.UNBALANCED_BRACES,
            )
        )
    if deepest > MAX_NESTING_DEPTH:
        diagnostics.append(
            ParseDiagnostic(
                message=f"Selections nested deeper than {MAX_NESTING_DEPTH} levels were collapsed",
                kind=DiagnosticKind.NESTING_TOO_DEEP,
            )
        )

    if skipped:
        diagnostics.append(
            ParseDiagnostic(
                message=f"Skipped {len(skipped)} token(s) outside any definition",
                kind=DiagnosticKind.SKIPPED_TOKENS,
                token_index=skipped[0],
            )
        )

    if definitions == 0 and text.strip():
        diagnostics.append(
            ParseDiagnostic(
                message="No operation or fragment definition found",
                kind=DiagnosticKind.NO_DEFINITIONS,
            )
        )

    return diagnostics

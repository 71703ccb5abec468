"""
GraphQL Lexer.

Splits an operation document into plain string tokens. The lexer has no
grammar knowledge and accepts any input: unbalanced braces, stray quotes and
non-GraphQL text all produce some token list.
"""

from typing import List, Set

PUNCTUATION: Set[str] = set("{}()[]:!$@")
QUOTES: Set[str] = {'"', "'"}


def is_separator(char: str) -> bool:
    """Whitespace and commas separate tokens and are never emitted."""
    return char == "," or char.isspace()


def tokenize(text: str) -> List[str]:
    """
    Convert raw text into an ordered list of tokens.

    Quoted literals keep their delimiters and any backslash-escaped quotes.
    A literal that is never closed is emitted as-is at end of input.

    Args:
        text (str): The operation document.

    Returns:
        List[str]: Tokens in source order.
    """
    tokens: List[str] = []
    current = ""
    quote: str | None = None
    previous = ""

    for char in text:
        if quote is not None:
            current += char
            if char == quote and previous != "\\":
                tokens.append(current)
                current = ""
                quote = None
        elif char in QUOTES:
            if current:
                tokens.append(current)
            current = char
            quote = char
        elif is_separator(char):
            if current:
                tokens.append(current)
            current = ""
        elif char in PUNCTUATION:
            if current:
                tokens.append(current)
            tokens.append(char)
            current = ""
        else:
            current += char
        previous = char

    if current:
        tokens.append(current)
    return tokens


def is_string_literal(token: str) -> bool:
    return bool(token) and token[0] in QUOTES


def is_unterminated_literal(token: str) -> bool:
    """True for a quoted token whose closing delimiter never arrived."""
    if not is_string_literal(token):
        return False
    return len(token) < 2 or token[-1] != token[0] or token[-2] == "\\"

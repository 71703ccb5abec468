"""
Structural GraphQL Parser.

Builds a forest of ``Node`` objects from lexer tokens without a full grammar
or validator. Every rule is a pure function ``rule(cursor) -> (result,
cursor)``; the cursor only moves forward, and a rule that runs out of tokens
returns whatever it has built so far. No input makes ``parse`` raise.
"""

from typing import List, Tuple

from ..core.types import (
    Argument,
    Directive,
    Node,
    NodeKind,
    OperationType,
    VariableDefinition,
)
from .cursor import Cursor

# Selection sets nested deeper than this are consumed without being expanded,
# which keeps recursion bounded for adversarial input.
MAX_NESTING_DEPTH = 128

SPREAD = "..."
OPENERS = {"{", "["}
CLOSERS = {"}", "]"}
VARIABLE_TYPE_TERMINATORS = {")", "=", "$"}
OPERATION_KEYWORDS = {op.value for op in OperationType}

Parsed = Tuple[Node | None, Cursor]


def parse(tokens) -> List[Node]:
    """
    Parse tokens into the top-level definitions of a document.

    Args:
        tokens: Tokens produced by ``tokenize``.

    Returns:
        List[Node]: Operations and fragment definitions in source order.
    """
    forest, _ = parse_forest(tokens)
    return forest


def parse_forest(tokens) -> Tuple[List[Node], List[int]]:
    """
    Parse tokens and also report which token positions were skipped.

    A position is skipped when no definition starts there; the cursor is
    forced one token forward so the loop always terminates.
    """
    forest: List[Node] = []
    skipped: List[int] = []
    cursor = Cursor.over(tokens)

    while not cursor.exhausted:
        node, after = parse_operation(cursor)
        if node is None or after.pos == cursor.pos:
            skipped.append(cursor.pos)
            cursor = cursor.advance()
            continue
        forest.append(node)
        cursor = after

    return forest, skipped


def parse_operation(cursor: Cursor) -> Parsed:
    """Parse one operation or fragment definition at the cursor."""
    keyword = cursor.peek()

    if keyword == "fragment":
        return parse_fragment_definition(cursor.advance())

    if keyword in OPERATION_KEYWORDS:
        cursor = cursor.advance()
        name = None
        if not cursor.exhausted and not cursor.at("(", "{"):
            name, cursor = cursor.take()
        variables, cursor = parse_variable_definitions(cursor)
        children, cursor = parse_selection_set(cursor)
        node = Node(
            kind=NodeKind.OPERATION,
            operation_type=OperationType(keyword),
            name=name,
            variable_definitions=variables,
            children=children,
        )
        return node, cursor

    if keyword == "{":
        children, cursor = parse_selection_set(cursor)
        node = Node(
            kind=NodeKind.OPERATION,
            operation_type=OperationType.QUERY,
            children=children,
        )
        return node, cursor

    return None, cursor


def parse_fragment_definition(cursor: Cursor) -> Parsed:
    """Parse ``Name on Type { ... }`` after the ``fragment`` keyword."""
    name, cursor = cursor.take()
    cursor = cursor.skip("on")
    type_condition = None
    if not cursor.exhausted and not cursor.at("{"):
        type_condition, cursor = cursor.take()
    children, cursor = parse_selection_set(cursor)
    node = Node(
        kind=NodeKind.FRAGMENT,
        name=name or "",
        type_condition=type_condition,
        children=children,
    )
    return node, cursor


def parse_variable_definitions(cursor: Cursor) -> Tuple[Tuple[VariableDefinition, ...] | None, Cursor]:
    """Parse ``($name: Type = default, ...)`` following an operation name."""
    if not cursor.at("("):
        return None, cursor
    cursor = cursor.advance()

    definitions: List[VariableDefinition] = []
    while not cursor.exhausted and not cursor.at(")"):
        if not cursor.at("$"):
            cursor = cursor.advance()
            continue

        name, cursor = cursor.advance().take()
        cursor = cursor.skip(":")

        type_parts: List[str] = []
        while not cursor.exhausted and not cursor.at(*VARIABLE_TYPE_TERMINATORS):
            token, cursor = cursor.take()
            type_parts.append(token)

        default_value = None
        if cursor.at("="):
            default_value, cursor = cursor.advance().take()

        definitions.append(
            VariableDefinition(
                name=name or "",
                type="".join(type_parts).strip(),
                default_value=default_value,
            )
        )

    cursor = cursor.skip(")")
    return tuple(definitions) or None, cursor


def parse_selection_set(cursor: Cursor, depth: int = 0) -> Tuple[Tuple[Node, ...] | None, Cursor]:
    """Parse ``{ selection ... }``. Returns ``None`` when there is no brace."""
    if not cursor.at("{"):
        return None, cursor
    if depth >= MAX_NESTING_DEPTH:
        return None, skip_block(cursor)
    cursor = cursor.advance()

    selections: List[Node] = []
    while not cursor.exhausted and not cursor.at("}"):
        node, cursor = parse_selection(cursor, depth)
        selections.append(node)

    cursor = cursor.skip("}")
    return tuple(selections) or None, cursor


def skip_block(cursor: Cursor) -> Cursor:
    """Consume a brace-balanced block without building nodes."""
    depth = 0
    while not cursor.exhausted:
        token, cursor = cursor.take()
        if token == "{":
            depth += 1
        elif token == "}":
            depth -= 1
            if depth == 0:
                break
    return cursor


def parse_selection(cursor: Cursor, depth: int = 0) -> Tuple[Node, Cursor]:
    """Parse a field, a fragment spread or an inline fragment."""
    token = cursor.peek()
    if token is not None and token.startswith(SPREAD):
        return parse_spread(token[len(SPREAD):], cursor.advance(), depth)
    return parse_field(cursor, depth)


def parse_spread(attached: str, cursor: Cursor, depth: int = 0) -> Tuple[Node, Cursor]:
    """
    Parse what follows ``...``.

    The lexer keeps ``...`` glued to the next word, so ``...UserFields``
    arrives as a single token and ``attached`` holds ``UserFields``.
    """
    if attached == "on" or (not attached and cursor.at("on")):
        if not attached:
            cursor = cursor.advance()
        type_condition, cursor = cursor.take()
        children, cursor = parse_selection_set(cursor, depth + 1)
        node = Node(
            kind=NodeKind.INLINE_FRAGMENT,
            type_condition=type_condition or "",
            children=children,
        )
        return node, cursor

    if not attached and cursor.at("{"):
        children, cursor = parse_selection_set(cursor, depth + 1)
        return Node(kind=NodeKind.INLINE_FRAGMENT, children=children), cursor

    name = attached
    if not name:
        name, cursor = cursor.take()
    return Node(kind=NodeKind.FRAGMENT, name=name or ""), cursor


def parse_field(cursor: Cursor, depth: int = 0) -> Tuple[Node, Cursor]:
    """Parse ``alias: name(args) @directive { ... }``."""
    name, cursor = cursor.take()
    alias = None
    if cursor.at(":"):
        alias = name
        name, cursor = cursor.advance().take()

    arguments, cursor = parse_arguments(cursor)
    directives, cursor = parse_directives(cursor)
    children, cursor = parse_selection_set(cursor, depth + 1)

    node = Node(
        kind=NodeKind.FIELD,
        name=name or "",
        alias=alias,
        arguments=arguments,
        directives=directives,
        children=children,
    )
    return node, cursor


def parse_directives(cursor: Cursor) -> Tuple[Tuple[Directive, ...] | None, Cursor]:
    directives: List[Directive] = []
    while cursor.at("@"):
        name, cursor = cursor.advance().take()
        arguments, cursor = parse_arguments(cursor)
        directives.append(Directive(name=name or "", arguments=arguments))
    return tuple(directives) or None, cursor


def parse_arguments(cursor: Cursor) -> Tuple[Tuple[Argument, ...] | None, Cursor]:
    """Parse ``(name: value, ...)`` for fields and directives alike."""
    if not cursor.at("("):
        return None, cursor
    cursor = cursor.advance()

    arguments: List[Argument] = []
    while not cursor.exhausted and not cursor.at(")"):
        name, cursor = cursor.take()
        if cursor.at(":"):
            value, cursor = parse_value(cursor.advance())
            arguments.append(Argument(name=name, value=value))

    cursor = cursor.skip(")")
    return tuple(arguments) or None, cursor


def parse_value(cursor: Cursor) -> Tuple[str, Cursor]:
    """
    Capture an argument value as an opaque string.

    Brackets and braces raise the depth; at depth zero the value ends before
    ``)`` or before a token that is followed by ``:`` (the next pair).
    """
    parts: List[str] = []
    depth = 0
    while not cursor.exhausted:
        token = cursor.peek()
        if token in OPENERS:
            depth += 1
        elif token in CLOSERS:
            depth -= 1
        if depth == 0 and (token == ")" or cursor.peek(1) == ":"):
            break
        parts.append(token)
        cursor = cursor.advance()
    return join_value(parts), cursor


def join_value(parts: List[str]) -> str:
    """Join value tokens with single spaces, keeping ``$`` on its name."""
    text = ""
    previous = None
    for part in parts:
        if previous is not None and previous != "$":
            text += " "
        text += part
        previous = part
    return text.strip()

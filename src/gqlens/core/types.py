"""
Core type definitions for gqlens.

The parse forest is made of immutable pydantic models. A single ``Node`` class
is discriminated by ``kind``; optional lists are ``None`` when absent and are
never stored empty, so a renderer can tell "no arguments" apart from a list.
"""

from enum import StrEnum
from typing import Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class NodeKind(StrEnum):
    """Kinds of nodes in the parse forest."""
    OPERATION = "operation"
    FIELD = "field"
    FRAGMENT = "fragment"
    INLINE_FRAGMENT = "inline-fragment"


class OperationType(StrEnum):
    """GraphQL operation keywords."""
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


DEFINITION_KEYWORDS = frozenset({"query", "mutation", "subscription", "fragment"})


class Argument(BaseModel):
    """A ``name: value`` pair. The value is the raw token span, unparsed."""
    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class Directive(BaseModel):
    """A ``@name(args)`` directive attached to a field."""
    name: str
    arguments: Tuple[Argument, ...] | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("arguments", mode="after")
    @classmethod
    def _empty_as_none(cls, value):
        return value or None


class VariableDefinition(BaseModel):
    """A ``$name: Type = default`` entry of an operation header."""
    name: str
    type: str
    default_value: str | None = None

    model_config = ConfigDict(frozen=True)


class Node(BaseModel):
    """
    Universal node of the parse forest.

    Which attributes are meaningful depends on ``kind``:

    - operation: operation_type, name, variable_definitions, children
    - field: name, alias, arguments, directives, children
    - fragment: name, plus type_condition and children for a definition;
      a spread carries only the name
    - inline-fragment: type_condition, children
    """
    kind: NodeKind
    name: str | None = None
    operation_type: OperationType | None = None
    alias: str | None = None
    type_condition: str | None = None
    arguments: Tuple[Argument, ...] | None = None
    directives: Tuple[Directive, ...] | None = None
    variable_definitions: Tuple[VariableDefinition, ...] | None = None
    children: Tuple["Node", ...] | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator(
        "arguments", "directives", "variable_definitions", "children", mode="after"
    )
    @classmethod
    def _empty_as_none(cls, value):
        return value or None

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def own_texts(self) -> Iterator[str]:
        """
        Yield the searchable text of this node, excluding descendants.

        Covers name, alias, operation keyword, type condition, argument names
        and values, and variable names and types.
        """
        for text in (self.name, self.alias, self.operation_type, self.type_condition):
            if text:
                yield str(text)
        for arg in self.arguments or ():
            yield arg.name
            yield arg.value
        for var in self.variable_definitions or ():
            yield var.name
            yield var.type

    def walk(self) -> Iterator["Node"]:
        """Depth-first pre-order traversal including this node."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def to_dict(self) -> dict:
        """JSON-ready dump with absent attributes left out."""
        return self.model_dump(mode="json", exclude_none=True)


def forest_to_dicts(forest: List[Node]) -> List[dict]:
    return [node.to_dict() for node in forest]

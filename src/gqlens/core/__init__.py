"""
Core data types for gqlens.
"""

from .types import (
    DEFINITION_KEYWORDS,
    Argument,
    Directive,
    Node,
    NodeKind,
    OperationType,
    VariableDefinition,
)

__all__ = [
    "DEFINITION_KEYWORDS",
    "Argument",
    "Directive",
    "Node",
    "NodeKind",
    "OperationType",
    "VariableDefinition",
]

"""
Parse result types.

The parser never raises; anything suspicious about a document is reported as
a non-fatal ``ParseDiagnostic`` on the ``ParseResult`` instead.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..core.types import Node


class DiagnosticKind:
    """Enum-like constants for diagnostic categories."""

    UNTERMINATED_STRING = "unterminated_string"
    UNBALANCED_BRACES = "unbalanced_braces"
    SKIPPED_TOKENS = "skipped_tokens"
    NESTING_TOO_DEEP = "nesting_too_deep"
    NO_DEFINITIONS = "no_definitions"


@dataclass
class ParseDiagnostic:
    """Represents a non-fatal problem found while parsing."""

    message: str
    kind: str = "general"
    token_index: int | None = None


@dataclass
class ParseResult:
    """
    Outcome of parsing one document.

    Holds the tokens, the forest and any diagnostics. The forest is complete
    on a best-effort basis even when diagnostics are present.
    """

    text: str
    tokens: List[str] = field(default_factory=list)
    forest: List[Node] = field(default_factory=list)
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)
    success: bool = True

    def __post_init__(self):
        if self.diagnostics:
            self.success = False

    @property
    def is_empty(self) -> bool:
        """True when no definition was recognised; show the raw text instead."""
        return not self.forest

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "token_count": len(self.tokens),
            "forest": [node.to_dict() for node in self.forest],
            "diagnostics": [
                {"kind": d.kind, "message": d.message, "token_index": d.token_index}
                for d in self.diagnostics
            ],
        }

"""
Immutable token cursor.

Grammar rules receive a ``Cursor`` and return the node they built together
with the advanced cursor. Reading past the end yields ``None`` instead of
raising, which is what lets truncated documents parse into partial nodes.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Cursor:
    """Position over a token sequence. Advancing returns a new cursor."""

    tokens: Tuple[str, ...]
    pos: int = 0

    @classmethod
    def over(cls, tokens) -> "Cursor":
        return cls(tuple(tokens), 0)

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self, offset: int = 0) -> str | None:
        index = self.pos + offset
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def at(self, *candidates: str) -> bool:
        """True when the current token is one of ``candidates``."""
        return self.peek() in candidates

    def advance(self, count: int = 1) -> "Cursor":
        return Cursor(self.tokens, min(self.pos + count, len(self.tokens)))

    def take(self) -> Tuple[str | None, "Cursor"]:
        """Return the current token and the cursor after it."""
        return self.peek(), self.advance()

    def skip(self, token: str) -> "Cursor":
        """Consume ``token`` if it is next; otherwise stay put."""
        return self.advance() if self.peek() == token else self

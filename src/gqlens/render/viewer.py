"""
Outline viewer.

Binds one document, its toolbar and its per-node state together. Loading new
text reparses from scratch and forgets all toggles.
"""

import logging
from typing import List

from ..core.types import Node
from ..parsing.base import ParseResult
from ..parsing.engine import parse_document
from .outline import OutlineState, Path, Row, derive_rows
from .toolbar import Toolbar

logger = logging.getLogger(__name__)


class OutlineViewer:
    def __init__(self, text: str = "", toolbar: Toolbar | None = None):
        self.toolbar = toolbar or Toolbar()
        self.state = OutlineState()
        self.result: ParseResult | None = None
        self.load(text)

    def load(self, text: str) -> ParseResult:
        self.result = parse_document(text)
        self.state.clear()
        return self.result

    @property
    def forest(self) -> List[Node]:
        return self.result.forest

    @property
    def is_empty(self) -> bool:
        """No structure recognised; callers fall back to the raw text."""
        return self.result.is_empty

    def rows(self, search_term: str | None = None) -> List[Row]:
        return derive_rows(self.forest, self.toolbar.state, self.state, search_term)

    def toggle(self, path: Path) -> bool:
        is_open = self.state.toggle(tuple(path), self.toolbar.state)
        logger.debug(f"Toggled {path} -> {'open' if is_open else 'closed'}")
        return is_open

    def copy_text(self) -> str:
        return self.toolbar.copy_text(self.result.text)

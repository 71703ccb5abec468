"""
Toolbar state for the outline viewer.

``ToolbarState`` is an immutable value object read by the renderer.
``Toolbar`` is its only writer and turns user gestures into new states.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ToolbarState(BaseModel):
    """
    Snapshot of the viewer toolbar.

    Only the relative order of the two generation counters matters: nodes
    without a manual toggle are collapsed when ``collapse_generation`` is the
    larger one and expanded otherwise, including the initial 0/0 pairing.
    """
    expand_generation: int = Field(default=0, ge=0)
    collapse_generation: int = Field(default=0, ge=0)
    search_visible: bool = False
    search_term: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def generation(self) -> tuple[int, int]:
        return (self.expand_generation, self.collapse_generation)

    @property
    def default_open(self) -> bool:
        return self.collapse_generation <= self.expand_generation

    @property
    def effective_search_term(self) -> str:
        """The search term, but only while the search box is shown."""
        return self.search_term if self.search_visible else ""


class Toolbar:
    """
    Single writer of a ``ToolbarState``.

    Each expand-all or collapse-all gesture moves its own counter one past
    the larger of the two, so the latest gesture decides the default state
    while both counters keep increasing.
    """

    def __init__(self, state: ToolbarState | None = None):
        self.state = state or ToolbarState()

    def expand_all(self) -> ToolbarState:
        top = max(self.state.generation)
        return self._update(expand_generation=top + 1)

    def collapse_all(self) -> ToolbarState:
        top = max(self.state.generation)
        return self._update(collapse_generation=top + 1)

    def toggle_search(self) -> ToolbarState:
        """Show or hide the search box. Hiding it clears the term."""
        visible = not self.state.search_visible
        term = self.state.search_term if visible else ""
        return self._update(search_visible=visible, search_term=term)

    def set_search_term(self, term: str) -> ToolbarState:
        return self._update(search_term=term)

    def clear_search(self) -> ToolbarState:
        return self._update(search_term="")

    @staticmethod
    def copy_text(text: str) -> str:
        """Copy action payload: the original document, untouched."""
        return text

    def _update(self, **changes) -> ToolbarState:
        self.state = self.state.model_copy(update=changes)
        logger.debug(f"Toolbar state: {self.state!r}")
        return self.state

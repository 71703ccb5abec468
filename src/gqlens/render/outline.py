"""
Interactive outline derivation.

Turns a parse forest plus the toolbar state into display rows: one row per
visible node in depth-first pre-order. Open/closed state lives in an
``OutlineState`` side table keyed by structural path, never on the nodes, so
the same forest can be shown with different states without reparsing.

Rules:
- A node without an explicit toggle follows the toolbar default.
- Any change of the generation pairing (expand all / collapse all) drops
  every explicit toggle; a later toggle overrides only its own node.
- While a search term is active, nodes that match it (directly or through a
  descendant) are shown open regardless of their toggles.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Iterable, List, Set, Tuple

from ..core.types import Node, NodeKind
from .toolbar import ToolbarState

logger = logging.getLogger(__name__)

Path = Tuple[int, ...]


class Toggle(StrEnum):
    """Explicit per-node state. A missing entry means unset."""
    OPEN = "open"
    CLOSED = "closed"


class Role(StrEnum):
    """Semantic role of a header segment, used for styling."""
    KEYWORD = "keyword"
    DEFINITION_NAME = "definition_name"
    NAME = "name"
    ALIAS = "alias"
    TYPE = "type"
    VARIABLE = "variable"
    ARGUMENT = "argument"
    VALUE = "value"
    DIRECTIVE = "directive"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True)
class Segment:
    """A piece of a row header."""
    text: str
    role: Role = Role.PUNCTUATION
    highlighted: bool = False


@dataclass(frozen=True)
class Row:
    """One displayable line of the outline."""
    path: Path
    depth: int
    segments: Tuple[Segment, ...]
    has_children: bool
    is_open: bool
    matched: bool = False

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)

    @property
    def highlights(self) -> List[str]:
        return [segment.text for segment in self.segments if segment.highlighted]


class OutlineState:
    """
    Per-node open/closed overrides keyed by structural path.

    The table remembers the generation pairing it was reconciled against;
    when the toolbar reports a different pairing all overrides are dropped.
    """

    def __init__(self):
        self._overrides: Dict[Path, Toggle] = {}
        self._generation: Tuple[int, int] | None = None

    def __len__(self) -> int:
        return len(self._overrides)

    def reconcile(self, toolbar: ToolbarState) -> None:
        if toolbar.generation == self._generation:
            return
        if self._overrides:
            logger.debug(
                f"Generation changed to {toolbar.generation}, "
                f"discarding {len(self._overrides)} toggle(s)"
            )
        self._overrides.clear()
        self._generation = toolbar.generation

    def get(self, path: Path) -> Toggle | None:
        return self._overrides.get(tuple(path))

    def is_open(self, path: Path, toolbar: ToolbarState) -> bool:
        """Toggle-derived state, ignoring search."""
        self.reconcile(toolbar)
        override = self._overrides.get(tuple(path))
        if override is None:
            return toolbar.default_open
        return override == Toggle.OPEN

    def set(self, path: Path, is_open: bool, toolbar: ToolbarState) -> None:
        self.reconcile(toolbar)
        self._overrides[tuple(path)] = Toggle.OPEN if is_open else Toggle.CLOSED

    def toggle(self, path: Path, toolbar: ToolbarState) -> bool:
        """Flip one node and return its new toggle-derived state."""
        is_open = not self.is_open(path, toolbar)
        self.set(path, is_open, toolbar)
        return is_open

    def clear(self) -> None:
        self._overrides.clear()


def matches_directly(node: Node, term: str) -> bool:
    """Case-sensitive substring match against the node's own text."""
    return any(term in text for text in node.own_texts())


def find_matches(forest: Iterable[Node], term: str) -> Set[Path]:
    """
    Paths of every node that matches ``term`` itself or through a descendant.

    An empty term matches nothing.
    """
    matched: Set[Path] = set()
    if not term:
        return matched
    for index, root in enumerate(forest):
        _collect_matches(root, (index,), term, matched)
    return matched


def _collect_matches(node: Node, path: Path, term: str, matched: Set[Path]) -> bool:
    found = matches_directly(node, term)
    for index, child in enumerate(node.children or ()):
        if _collect_matches(child, path + (index,), term, matched):
            found = True
    if found:
        matched.add(path)
    return found


def highlight(text: str, role: Role, term: str) -> List[Segment]:
    """Split ``text`` so the first occurrence of ``term`` is its own segment."""
    index = text.find(term) if term else -1
    if index == -1:
        return [Segment(text, role)]

    end = index + len(term)
    segments = []
    if index:
        segments.append(Segment(text[:index], role))
    segments.append(Segment(text[index:end], role, highlighted=True))
    if end < len(text):
        segments.append(Segment(text[end:], role))
    return segments


def build_header(node: Node, is_definition: bool, is_open: bool, term: str = "") -> List[Segment]:
    """
    Lay out a node's header left to right.

    ``is_definition`` separates a top-level fragment definition from a
    fragment spread inside a selection set.
    """
    segments: List[Segment] = []
    space = Segment(" ")

    if node.kind == NodeKind.OPERATION:
        segments += highlight(str(node.operation_type or ""), Role.KEYWORD, term)
        if node.name is not None:
            segments += [space, *highlight(node.name, Role.DEFINITION_NAME, term)]

    elif node.kind == NodeKind.FRAGMENT and is_definition:
        segments += [Segment("fragment", Role.KEYWORD), space]
        segments += highlight(node.name or "", Role.DEFINITION_NAME, term)
        if node.type_condition is not None:
            segments += [space, Segment("on", Role.KEYWORD), space]
            segments += highlight(node.type_condition, Role.TYPE, term)

    elif node.kind == NodeKind.FRAGMENT:
        segments.append(Segment("..."))
        segments += highlight(node.name or "", Role.NAME, term)

    elif node.kind == NodeKind.INLINE_FRAGMENT:
        segments.append(Segment("..."))
        if node.type_condition is not None:
            segments += [space, Segment("on", Role.KEYWORD), space]
            segments += highlight(node.type_condition, Role.TYPE, term)

    else:
        if node.alias is not None:
            segments += highlight(node.alias, Role.ALIAS, term)
            segments.append(Segment(": "))
        segments += highlight(node.name or "", Role.NAME, term)

    if node.variable_definitions:
        segments.append(Segment("("))
        for i, var in enumerate(node.variable_definitions):
            if i:
                segments.append(Segment(", "))
            segments.append(Segment("$", Role.VARIABLE))
            segments += highlight(var.name, Role.VARIABLE, term)
            segments.append(Segment(": "))
            segments += highlight(var.type, Role.TYPE, term)
            if var.default_value is not None:
                segments += [Segment(" = "), Segment(var.default_value, Role.VALUE)]
        segments.append(Segment(")"))

    if node.arguments:
        segments.append(Segment("("))
        for i, arg in enumerate(node.arguments):
            if i:
                segments.append(Segment(", "))
            segments += highlight(arg.name, Role.ARGUMENT, term)
            segments.append(Segment(": "))
            segments += highlight(arg.value, Role.VALUE, term)
        segments.append(Segment(")"))

    for directive in node.directives or ():
        segments += [space, Segment(f"@{directive.name}", Role.DIRECTIVE)]
        if directive.arguments:
            segments.append(Segment("("))
            for i, arg in enumerate(directive.arguments):
                if i:
                    segments.append(Segment(", "))
                segments += [
                    Segment(arg.name, Role.ARGUMENT),
                    Segment(": "),
                    Segment(arg.value, Role.VALUE),
                ]
            segments.append(Segment(")"))

    if node.has_children:
        segments += [space, Segment("{" if is_open else "{ ... }")]

    return segments


def derive_rows(
    forest: Iterable[Node],
    toolbar: ToolbarState,
    state: OutlineState | None = None,
    search_term: str | None = None,
) -> List[Row]:
    """
    Derive the visible rows of the outline.

    Args:
        forest: Top-level definitions from the parser.
        toolbar: Current toolbar state.
        state: Per-node overrides. A fresh table is used when omitted.
        search_term: Overrides the toolbar's effective search term.

    Returns:
        List[Row]: Visible rows in depth-first pre-order.
    """
    if state is None:
        state = OutlineState()
    state.reconcile(toolbar)

    term = toolbar.effective_search_term if search_term is None else search_term
    forest = list(forest)
    matched = find_matches(forest, term)

    rows: List[Row] = []
    for index, root in enumerate(forest):
        _emit(root, (index,), toolbar, state, term, matched, rows)
    return rows


def _emit(
    node: Node,
    path: Path,
    toolbar: ToolbarState,
    state: OutlineState,
    term: str,
    matched: Set[Path],
    rows: List[Row],
) -> None:
    has_children = node.has_children
    is_match = path in matched
    is_open = has_children and (is_match or state.is_open(path, toolbar))

    rows.append(
        Row(
            path=path,
            depth=len(path) - 1,
            segments=tuple(build_header(node, len(path) == 1, is_open, term)),
            has_children=has_children,
            is_open=is_open,
            matched=is_match,
        )
    )

    if is_open:
        for index, child in enumerate(node.children):
            _emit(child, path + (index,), toolbar, state, term, matched, rows)

"""Unit tests for rich rendering of outline rows."""

import io

import pytest
from rich.console import Console

from gqlens.config import ViewerSettings
from gqlens.parsing.engine import parse_document
from gqlens.render.console import build_tree, render_lines, render_outline, row_text
from gqlens.render.outline import OutlineState, derive_rows
from gqlens.render.toolbar import ToolbarState


@pytest.fixture
def rows():
    forest = parse_document("query { a { b } c }").forest
    return derive_rows(forest, ToolbarState())


def plain(lines):
    return [line.plain for line in lines]


class TestRenderLines:
    def test_brace_outline(self, rows):
        assert plain(render_lines(rows)) == [
            "▾ query {",
            "  ▾ a {",
            "      b",
            "    }",
            "    c",
            "  }",
        ]

    def test_collapsed_node_has_no_closing_brace(self):
        forest = parse_document("query { a { b } }").forest
        state = OutlineState()
        state.set((0, 0), False, ToolbarState())
        lines = render_lines(derive_rows(forest, ToolbarState(), state))
        assert plain(lines) == ["▾ query {", "  ▸ a { ... }", "  }"]

    def test_indent_width_setting(self, rows):
        lines = render_lines(rows, ViewerSettings(indent_width=4))
        assert lines[1].plain == "    ▾ a {"

    def test_empty_rows(self):
        assert render_lines([]) == []


class TestRowText:
    def test_highlight_style_applied(self):
        forest = parse_document("{ email }").forest
        row = derive_rows(forest, ToolbarState(), search_term="mail")[1]
        text = row_text(row, ViewerSettings(highlight_style="on yellow"))
        styled = [text.plain[span.start:span.end] for span in text.spans if "yellow" in str(span.style)]
        assert styled == ["mail"]

    def test_role_styles_applied(self):
        forest = parse_document("{ email }").forest
        row = derive_rows(forest, ToolbarState())[1]
        settings = ViewerSettings(role_styles={"name": "red"})
        text = row_text(row, settings)
        assert any(str(span.style) == "red" for span in text.spans)


class TestTree:
    def test_tree_nests_by_depth(self, rows):
        tree = build_tree(rows, "GraphQL Query")
        assert len(tree.children) == 1
        query = tree.children[0]
        assert [child.label.plain for child in query.children] == ["▾ a {", "c"]
        assert query.children[0].children[0].label.plain == "b"


def test_render_outline_prints_plain_text(rows):
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=120)
    render_outline(rows, console=console)
    assert buffer.getvalue().splitlines()[0].rstrip() == "▾ query {"


def test_render_outline_as_tree(rows):
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=120)
    render_outline(rows, console=console, as_tree=True, label="Doc")
    output = buffer.getvalue()
    assert output.splitlines()[0].rstrip() == "Doc"
    assert "▾ query {" in output

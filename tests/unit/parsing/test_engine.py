"""
Unit tests for the parse_document engine and its diagnostics.
"""

import logging

from gqlens.core.types import NodeKind
from gqlens.parsing.base import DiagnosticKind, ParseResult
from gqlens.parsing.engine import parse_document


def kinds(result: ParseResult):
    return {d.kind for d in result.diagnostics}


class TestParseDocument:
    def test_clean_document(self):
        result = parse_document("query GetUser($id: ID!) { user(id: $id) { name email } }")
        assert result.success
        assert result.diagnostics == []
        assert len(result.tokens) == 22
        assert result.forest[0].kind == NodeKind.OPERATION
        assert not result.is_empty

    def test_empty_text_is_not_an_error(self):
        result = parse_document("")
        assert result.success
        assert result.is_empty

    def test_reparse_is_fresh(self):
        """Each call builds a new, equal forest."""
        first = parse_document("{ a }")
        second = parse_document("{ a }")
        assert first.forest == second.forest
        assert first is not second


class TestDiagnostics:
    def test_garbage_reports_skips_and_no_definitions(self):
        result = parse_document("this is not graphql")
        assert not result.success
        assert result.is_empty
        assert kinds(result) == {DiagnosticKind.SKIPPED_TOKENS, DiagnosticKind.NO_DEFINITIONS}

        skipped = next(d for d in result.diagnostics if d.kind == DiagnosticKind.SKIPPED_TOKENS)
        assert skipped.token_index == 0
        assert "4 token(s)" in skipped.message

    def test_unterminated_string(self):
        result = parse_document('query { a(s: "oops) }')
        assert DiagnosticKind.UNTERMINATED_STRING in kinds(result)
        assert DiagnosticKind.UNBALANCED_BRACES in kinds(result)
        # The partial structure survives
        assert result.forest[0].children[0].name == "a"

    def test_unbalanced_braces(self):
        result = parse_document("{ user { name }")
        assert kinds(result) == {DiagnosticKind.UNBALANCED_BRACES}
        assert "+1" in result.diagnostics[0].message

    def test_nesting_too_deep(self):
        result = parse_document("{ a " * 300 + "}" * 300)
        assert DiagnosticKind.NESTING_TOO_DEEP in kinds(result)
        assert len(result.forest) == 1

    def test_diagnostics_are_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gqlens.parsing.engine"):
            parse_document("nonsense")
        assert any("no_definitions" in r.getMessage() for r in caplog.records)

    def test_to_dict(self):
        data = parse_document("{ a } junk").to_dict()
        assert data["success"] is False
        assert data["token_count"] == 4
        assert data["forest"] == [
            {"kind": "operation", "operation_type": "query", "children": [{"kind": "field", "name": "a"}]}
        ]
        assert data["diagnostics"][0]["kind"] == "skipped_tokens"
        assert data["diagnostics"][0]["token_index"] == 3

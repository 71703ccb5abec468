"""
Unit tests for the 'show' CLI command.
"""

import pytest
from click.testing import CliRunner

from gqlens.cli.main import main

QUERY = "query GetUser($id: ID!) { user(id: $id) { name email } }"


class TestShowCommand:

    @pytest.fixture
    def runner(self):
        return CliRunner(env={"FORCE_COLOR": None})

    def test_full_outline(self, runner):
        result = runner.invoke(main, ["show", "-"], input=QUERY)
        assert result.exit_code == 0, result.output
        lines = [line.rstrip() for line in result.output.splitlines()]
        assert lines == [
            "▾ query GetUser($id: ID!) {",
            "  ▾ user(id: $id) {",
            "      name",
            "      email",
            "    }",
            "  }",
        ]

    def test_collapse_all(self, runner):
        result = runner.invoke(main, ["show", "-", "--collapse-all"], input=QUERY)
        assert result.exit_code == 0
        assert result.output.strip() == "▸ query GetUser($id: ID!) { ... }"

    def test_collapse_all_then_toggle(self, runner):
        result = runner.invoke(main, ["show", "-", "--collapse-all", "-t", "0"], input=QUERY)
        assert result.exit_code == 0
        assert "▸ user(id: $id) { ... }" in result.output

    def test_search_expands_matches(self, runner):
        result = runner.invoke(
            main, ["show", "-", "--collapse-all", "--search", "email"], input=QUERY
        )
        assert result.exit_code == 0
        assert "      email" in result.output
        assert "▾ user(id: $id) {" in result.output

    def test_tree_layout(self, runner):
        result = runner.invoke(main, ["show", "-", "--tree"], input=QUERY)
        assert result.exit_code == 0
        assert "GraphQL Query" in result.output
        assert "email" in result.output

    def test_reads_file(self, runner, tmp_path):
        path = tmp_path / "op.graphql"
        path.write_text("{ viewer { id } }")
        result = runner.invoke(main, ["show", str(path)])
        assert result.exit_code == 0
        assert "▾ viewer {" in result.output

    def test_unparseable_text_falls_back_to_raw(self, runner):
        result = runner.invoke(main, ["show", "-"], input="SELECT * FROM users")
        assert result.exit_code == 0
        assert "SELECT * FROM users" in result.output

    def test_invalid_toggle_path(self, runner):
        result = runner.invoke(main, ["show", "-", "-t", "a.b"], input=QUERY)
        assert result.exit_code == 2
        assert "dotted path" in result.output

    def test_invalid_config_exits(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("indent_width: -3\n")
        result = runner.invoke(main, ["--config", str(path), "show", "-"], input=QUERY)
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_config_indent(self, runner, tmp_path):
        path = tmp_path / "wide.yaml"
        path.write_text("indent_width: 4\n")
        result = runner.invoke(main, ["--config", str(path), "show", "-"], input=QUERY)
        assert result.exit_code == 0
        assert "    ▾ user(id: $id) {" in result.output

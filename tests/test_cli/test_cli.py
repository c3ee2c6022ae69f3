"""Tests for the themecss CLI commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from themecss.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "fix-host" in result.output
        assert "prop" in result.output
        assert "palette" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "themecss" in result.output


# ---------------------------------------------------------------------------
# fix-host
# ---------------------------------------------------------------------------


class TestFixHostCommand:
    def test_fixes_selectors(self) -> None:
        result = CliRunner().invoke(cli, ["fix-host", ":host:hover", ":host([a]):focus, .b"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [":host(:hover)", ":host([a]:focus)", ".b"]

    def test_append_variant(self) -> None:
        result = CliRunner().invoke(
            cli, ["fix-host", ":host([outlined]), :host, :host button", "--append", ":hover"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            ":host([outlined])",
            ":host",
            ":host button",
            ":host([outlined]:hover)",
            ":host(:hover)",
            ":host button:hover",
        ]

    def test_requires_selector(self) -> None:
        result = CliRunner().invoke(cli, ["fix-host"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# prop
# ---------------------------------------------------------------------------


class TestPropCommand:
    def test_theme_role(self) -> None:
        result = CliRunner().invoke(cli, ["prop", "color", "primary", "--selector", ":host:hover"])
        assert result.exit_code == 0
        assert ":host(:hover) {" in result.output
        assert "color: var(--theme-primary, #6200ee);" in result.output
        assert "--theme-primary: #6200ee;" in result.output

    def test_literal(self) -> None:
        result = CliRunner().invoke(cli, ["prop", "width", "12px", "--important"])
        assert result.exit_code == 0
        assert result.output == ":host {\n  width: 12px !important;\n}\n"

    def test_legacy_invalid_key(self) -> None:
        result = CliRunner().invoke(cli, ["prop", "color", "primery", "--legacy"])
        assert result.exit_code == 1
        assert "Invalid style: 'primery'" in result.output

    def test_query_excludes_color(self) -> None:
        result = CliRunner().invoke(cli, ["prop", "color", "primary", "--query", "-color"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_config_file(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"palette": {"brand": "#123"}, "prefix": "acme"}))
        result = CliRunner().invoke(cli, ["prop", "color", "brand", "--config", str(path)])
        assert result.exit_code == 0
        assert "var(--acme-brand, #123)" in result.output

    def test_bad_config_file(self, tmp_path) -> None:
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"colours": {}}))
        result = CliRunner().invoke(cli, ["prop", "color", "red", "--config", str(path)])
        assert result.exit_code == 1
        assert "Config error" in result.output


# ---------------------------------------------------------------------------
# palette
# ---------------------------------------------------------------------------


class TestPaletteCommand:
    def test_lists_roles(self) -> None:
        result = CliRunner().invoke(cli, ["palette"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["primary", "#6200ee", "--theme-primary"]
        assert len(lines) == 24

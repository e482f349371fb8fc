"""Tests for flutterfire platforms command."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from flutterfire_cli.cli.commands.platforms import platform_rows
from flutterfire_cli.cli.main import app
from flutterfire_cli.core.utils.table import strip_style

runner = CliRunner()


@pytest.fixture
def wide_terminal():
    """Report a terminal wide enough for the full table."""
    with patch(
        "flutterfire_cli.cli.commands.platforms.terminal_width", return_value=120
    ) as width:
        yield width


class TestPlatformRows:
    """Tests for the rows behind the platforms table."""

    def test_rows_cover_supported_platforms(self):
        """Test that there is a header plus one row per platform."""
        rows = platform_rows()

        assert len(rows) == 7
        assert [strip_style(cell) for cell in rows[0]] == [
            "Platform",
            "Key",
            "firebase.json",
        ]

    def test_apple_platforms_marked_configured(self):
        """Test that only the canonical block's platforms show as configured."""
        rows = {strip_style(row[1]): strip_style(row[2]) for row in platform_rows()[1:]}

        assert rows["ios"] == "yes"
        assert rows["macos"] == "yes"
        assert rows["android"] == "no"


class TestPlatformsCommand:
    """Tests for flutterfire platforms."""

    def test_output_is_aligned(self, wide_terminal):
        """Test that the printed table lines up its columns."""
        result = runner.invoke(app, ["platforms"])

        assert result.exit_code == 0
        lines = result.output.rstrip("\n").split("\n")
        assert lines[0] == "Platform" + " " * 2 + "Key" + " " * 6 + "firebase.json"
        assert "iOS" + " " * 7 + "ios" + " " * 6 + "yes" in lines
        assert "Android" + " " * 3 + "android" + " " * 2 + "no" in lines

    def test_narrow_terminal_uses_single_gap(self):
        """Test that columns tighten when the table would not fit."""
        with patch(
            "flutterfire_cli.cli.commands.platforms.terminal_width", return_value=20
        ):
            result = runner.invoke(app, ["platforms"])

        assert result.exit_code == 0
        lines = result.output.rstrip("\n").split("\n")
        assert lines[0] == "Platform" + " " + "Key" + " " * 5 + "firebase.json"
        assert "Android" + " " * 2 + "android" + " " + "no" in lines

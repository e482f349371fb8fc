"""Supported platform listing."""

import typer

from ...core.constants import FIREBASE_JSON_PLATFORMS, SUPPORTED_PLATFORMS
from ...core.utils.table import list_as_padded_table, visual_length
from ...core.utils.terminal import terminal_width

_DISPLAY_NAMES = {
    "android": "Android",
    "ios": "iOS",
    "macos": "macOS",
    "web": "Web",
    "windows": "Windows",
    "linux": "Linux",
}


def _style(text: str, color: str) -> str:
    return typer.style(text, fg=color)


def platform_rows() -> list[list[str]]:
    """Build the styled rows shown by ``flutterfire platforms``."""
    rows = [
        [
            _style("Platform", "white"),
            _style("Key", "white"),
            _style("firebase.json", "white"),
        ]
    ]
    for platform in SUPPORTED_PLATFORMS:
        configured = platform in FIREBASE_JSON_PLATFORMS
        rows.append(
            [
                _style(_DISPLAY_NAMES[platform], "cyan"),
                platform,
                _style("yes", "green") if configured else _style("no", "bright_black"),
            ]
        )
    return rows


def platforms_command():
    """Show supported platforms and their firebase.json entries."""
    rows = platform_rows()
    table = list_as_padded_table(rows, padding_size=2)
    # Tighten the gaps rather than let narrow terminals wrap the rows
    if max(visual_length(line) for line in table.split("\n")) > terminal_width():
        table = list_as_padded_table(rows, padding_size=1)
    # click strips the styles again when stdout is not a terminal
    typer.echo(table)
    return table

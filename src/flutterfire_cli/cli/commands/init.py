"""Project initialization command."""

from pathlib import Path
from typing import Optional

import questionary
import typer
from rich.console import Console
from rich.markup import escape

from ...core.exceptions import FlutterFireError
from ...core.firebase_json import (
    FirebaseJsonUpdate,
    ensure_configured,
    firebase_json_path,
)
from ...core.utils.terminal import is_ci, spinner

console = Console()

_RESULT_MESSAGES = {
    FirebaseJsonUpdate.CREATED: "[green]Created[/green] {path}",
    FirebaseJsonUpdate.UPDATED: "[green]Added flutter configuration to[/green] {path}",
    FirebaseJsonUpdate.UNCHANGED: "[dim]{path} already configured, nothing to do[/dim]",
}


def init_command(
    project_dir: Optional[Path] = typer.Argument(
        None, help="Flutter project directory (defaults to current directory)"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
):
    """Add the flutter block to the project's firebase.json."""
    project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
    path = firebase_json_path(project_dir)

    # Only an existing file is worth confirming, a new one touches nothing
    if path.exists() and not yes and not is_ci():
        try:
            confirmed = questionary.confirm(
                f"Update {path} with the flutter configuration?", default=True
            ).ask()
        except KeyboardInterrupt:
            confirmed = False

        if not confirmed:
            console.print("[yellow]Initialization aborted.[/yellow]")
            raise typer.Exit(0)

    try:
        status = spinner(f"Configuring {path}...", console=console)
        try:
            result = ensure_configured(project_dir)
        finally:
            status.stop()
    except FlutterFireError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(_RESULT_MESSAGES[result].format(path=path))
    return result

"""Main CLI entry point for FlutterFire CLI."""

import typer
from importlib import metadata
from pathlib import Path
from rich.console import Console
from rich.panel import Panel


def get_version() -> str:
    """Get the package version from metadata."""
    try:
        return metadata.version("flutterfire-cli")
    except metadata.PackageNotFoundError:
        return "unknown"


console = Console()

# command: flutterfire
app = typer.Typer(
    name="flutterfire",
    help="FlutterFire CLI - Configure Flutter apps for Firebase",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# command: flutterfire <command>


@app.command("init")
def init_cmd(
    project_dir: Path = typer.Argument(
        None, help="Flutter project directory (defaults to current directory)"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
):
    """Add the flutter block to the project's firebase.json."""
    from .commands.init import init_command

    return init_command(project_dir, yes)


@app.command("platforms")
def platforms_cmd():
    """Show supported platforms and their firebase.json entries."""
    from .commands.platforms import platforms_command

    return platforms_command()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    """FlutterFire CLI - Configure Flutter apps for Firebase."""
    if version:
        console.print(f"FlutterFire CLI v{get_version()}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            Panel(
                "[bold blue]FlutterFire CLI[/bold blue]\n\n"
                "Prepares Flutter applications for Firebase.\n\n"
                "Use [bold]flutterfire --help[/bold] to see available commands.",
                title="Welcome",
                expand=False,
            )
        )


if __name__ == "__main__":
    app()

"""Root callback for the commitgenius CLI."""

import typer

from commitgenius import __version__


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate commit messages from staged changes with a local Ollama model."""
    if version:
        typer.echo(f"commitgenius {__version__}")
        raise typer.Exit()

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    typer.echo(ctx.get_help())

"""CLI command for listing conventional commit types."""

import typer

from commitgenius.styles import CommitType


def types_command() -> None:
    """List the conventional commit types and what they are for."""
    typer.echo("Available commit types:")
    typer.echo()

    width = max(len(commit_type.value) for commit_type in CommitType)
    for commit_type in CommitType:
        typer.echo(f"  {commit_type.value:<{width}}  {commit_type.description}")

    typer.echo()
    typer.echo("Use 'commitgenius generate --conventional --type <type>' to force one.")

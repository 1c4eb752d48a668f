"""Shared utility functions for CLI commands."""

import os
import shutil
import subprocess
from pathlib import Path

import typer

from commitgenius.git import get_git_dir
from commitgenius.llm import LLMResult
from commitgenius.styles import DiffStats, infer_commit_type

EDIT_MESSAGE_FILENAME = "COMMIT_GENIUS_EDITMSG"

# Tried in order when neither $EDITOR nor $VISUAL is set
FALLBACK_EDITORS = ["nano", "vim", "vi"]


def find_editor() -> list[str]:
    """Find an available text editor.

    Preference order:
    1. $EDITOR environment variable
    2. $VISUAL environment variable
    3. nano, vim, vi (first one installed)

    Returns:
        List of command parts to run the editor.
    """
    editor = os.environ.get("EDITOR") or os.environ.get("VISUAL")
    if editor:
        return editor.split()

    for candidate in FALLBACK_EDITORS:
        # noinspection PyArgumentList
        if shutil.which(candidate):
            return [candidate]

    # Last resort: vi
    return ["vi"]


def open_editor(file_path: Path) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
    """
    editor_cmd = find_editor()

    typer.echo(f"Opening editor: {' '.join(editor_cmd)}", err=True)

    try:
        # Run the editor and wait for it to complete
        result = subprocess.run(
            editor_cmd + [str(file_path)],
            check=False,
        )

        if result.returncode != 0:
            typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)

    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(1)


def edit_message(message: str) -> str:
    """Let the user edit a commit message in their editor.

    The message is written to a file in the git directory, the editor is
    opened on it, and the saved content is read back.

    Args:
        message: The message to start from.

    Returns:
        The edited message, stripped of surrounding whitespace.
    """
    message_file = get_git_dir() / EDIT_MESSAGE_FILENAME
    message_file.write_text(message + "\n")

    open_editor(message_file)

    return message_file.read_text().strip()


def display_message(message: str, title: str) -> None:
    """Print the commit message between separator lines."""
    typer.echo("")
    typer.echo(title)
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)
    typer.echo("")


def display_debug_info(result: LLMResult, diff: str) -> None:
    """Display the raw completion and the classifier's view of the diff.

    Args:
        result: The generation result.
        diff: The staged diff that was sent to the model.
    """
    stats = DiffStats.from_diff(diff)

    typer.echo("=" * 60, err=True)
    typer.echo("                COMMITGENIUS DEBUG INFO", err=True)
    typer.echo("=" * 60, err=True)
    typer.echo(f"Model: {result.model}", err=True)
    typer.echo(f"Diff: {len(diff):,} chars, +{stats.additions} / -{stats.deletions} lines", err=True)
    typer.echo(f"Inferred type: {infer_commit_type(diff).value}", err=True)
    typer.echo("", err=True)
    typer.echo("[RAW LLM RESPONSE]", err=True)
    typer.echo(result.raw_response, err=True)
    typer.echo("=" * 60, err=True)

"""CLI entry point for commitgenius.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitgenius.cli.config import config_app
from commitgenius.cli.generate import generate_command
from commitgenius.cli.main import main_command
from commitgenius.cli.style import types_command

# Main application
app = typer.Typer(
    name="commitgenius",
    help="commitgenius: commit messages from your staged changes, written by a local LLM",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("generate")(generate_command)
app.command("types")(types_command)

# Set the main callback (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "generate_command",
    "main_command",
    "types_command",
]

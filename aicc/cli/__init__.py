"""CLI entry point for aicc.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from aicc.cli.config import config_app
from aicc.cli.main import generate_command, main_command
from aicc.cli.refine import refine_command
from aicc.cli.reword import reword_command
from aicc.cli.split import split_command

# Main application
app = typer.Typer(
    name="aicc",
    help="aicc: AI-assisted Conventional Commits",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("generate")(generate_command)
app.command("split")(split_command)
app.command("refine")(refine_command)
app.command("reword")(reword_command)

# Default behavior (no subcommand) generates a single commit
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "generate_command",
    "main_command",
    "refine_command",
    "reword_command",
    "split_command",
]

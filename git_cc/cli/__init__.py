"""CLI entry point for git-cc.

This module provides the Typer application. Running `git-cc` without
arguments starts the interactive commit wizard.
"""

import typer

from git_cc.cli.main import main_command, print_version

# Main application
app = typer.Typer(
    name="git-cc",
    help="git-cc: interactive conventional commit wizard",
    add_completion=False,
)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "main_command",
    "print_version",
]

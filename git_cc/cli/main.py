"""Main CLI command that launches the commit wizard."""

import platform
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from git_cc import __version__
from git_cc.config import ConfigError, get_default_log_file, load_config
from git_cc.flow import CommitFlow
from git_cc.git import (
    GitError,
    NoStagedChangesError,
    NotInRepositoryError,
    ensure_staged_changes,
    get_git_version,
)
from git_cc.log import setup_logging
from git_cc.tui import CommitWizardApp


def print_version() -> None:
    """Print version information for git-cc and its environment."""
    typer.echo(f"git-cc {__version__}")
    typer.echo(f"  Python: {platform.python_version()}")
    typer.echo(f"  Git: {get_git_version()}")


def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version information and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging (written to ~/.git-cc/git-cc.log unless --log-file is set)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write logs to this file instead of stderr",
    ),
) -> None:
    """Write a conventional commit message for the staged changes and commit."""
    if version:
        print_version()
        raise typer.Exit(0)

    try:
        config = load_config()
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    log_file = log_file or config.log_file
    if debug and log_file is None:
        # The wizard draws its screen on stderr
        log_file = get_default_log_file()

    setup_logging(
        log_level="DEBUG" if debug else config.log_level,
        log_file=log_file,
    )

    # Step 1: Check that there is something to commit
    try:
        staged_files = ensure_staged_changes()
    except NotInRepositoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Error checking git status: {e}", err=True)
        raise typer.Exit(1)

    logger.debug("{} staged file(s)", len(staged_files))

    # Step 2: Run the wizard
    flow = CommitFlow(
        scope_char_limit=config.scope_char_limit,
        message_char_limit=config.message_char_limit,
    )
    try:
        outcome = CommitWizardApp(flow).run()
    except Exception as e:
        logger.exception("Wizard crashed")
        typer.echo(f"Error running program: {e}", err=True)
        raise typer.Exit(1)

    # Step 3: Report the result
    if outcome is None:
        typer.echo("Commit cancelled.", err=True)
        raise typer.Exit(0)

    typer.echo("Commit successful!", err=True)
    typer.echo(flow.state.commit_message)

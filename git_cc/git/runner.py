"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- is_git_repository: Check whether the working directory is inside a repo
- get_git_version: Get the installed git version string
"""

import subprocess

from loguru import logger

from git_cc.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running git {}", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def is_git_repository() -> bool:
    """Check if the current directory is inside a git repository.

    Returns:
        True if `git rev-parse --git-dir` succeeds, False otherwise.
    """
    try:
        _run_git_command(["rev-parse", "--git-dir"])
    except GitError as e:
        logger.debug("Not inside a git repository: {}", e)
        return False
    return True


def get_git_version() -> str:
    """Get the installed git version.

    Returns:
        The version reported by `git --version`, or "unavailable".
    """
    try:
        return _run_git_command(["--version"]).removeprefix("git version ").strip()
    except GitError:
        return "unavailable"

"""Git status utilities.

Contains:
- get_staged_files: Get list of staged file paths
- ensure_staged_changes: Check the startup preconditions for a commit
"""

from git_cc.git.exceptions import NoStagedChangesError, NotInRepositoryError
from git_cc.git.runner import _run_git_command, is_git_repository


def get_staged_files() -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths.

    Raises:
        GitError: If git cannot list the index.
    """
    output = _run_git_command(["diff", "--cached", "--name-only"])
    if not output:
        return []
    return output.split("\n")


def ensure_staged_changes() -> list[str]:
    """Verify that a commit can be attempted from the current directory.

    Returns:
        The staged file paths.

    Raises:
        NotInRepositoryError: If not inside a git repository.
        NoStagedChangesError: If the index has no staged changes.
        GitError: If the staged files could not be listed.
    """
    if not is_git_repository():
        raise NotInRepositoryError(
            "not a git repository (or any of the parent directories): .git"
        )

    staged_files = get_staged_files()
    if not staged_files:
        raise NoStagedChangesError(
            "No staged files found. Stage files with 'git add' first."
        )
    return staged_files

"""Git-related exception classes.

Contains all exception classes for startup git checks:
- GitError: Base exception for git-related errors
- NotInRepositoryError: Raised outside of a git working tree
- NoStagedChangesError: Raised when there are no staged changes

Commit attempts never raise these; their failures are returned as
CommitOutcome values (see git_cc.git.commit).
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotInRepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass

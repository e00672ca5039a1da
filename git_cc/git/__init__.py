"""Git integration for git-cc.

This package provides:
- exceptions: GitError, NotInRepositoryError, NoStagedChangesError
- runner: _run_git_command, is_git_repository, get_git_version
- status: get_staged_files, ensure_staged_changes
- models: CommitStatus, Classification, CommitOutcome
- classify: classify, is_benign_warning_output, FAILURE_RULES
- commit: commit
"""

# Exceptions
from git_cc.git.exceptions import (
    GitError,
    NotInRepositoryError,
    NoStagedChangesError,
)

# Runner utilities
from git_cc.git.runner import (
    _run_git_command,
    is_git_repository,
    get_git_version,
)

# Status utilities
from git_cc.git.status import (
    get_staged_files,
    ensure_staged_changes,
)

# Commit models
from git_cc.git.models import (
    CommitStatus,
    Classification,
    CommitOutcome,
)

# Error classifier
from git_cc.git.classify import (
    FAILURE_RULES,
    ClassificationRule,
    classify,
    is_benign_warning_output,
)

# Commit invoker
from git_cc.git.commit import commit


__all__ = [
    # Exceptions
    "GitError",
    "NotInRepositoryError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "is_git_repository",
    "get_git_version",
    # Status
    "get_staged_files",
    "ensure_staged_changes",
    # Models
    "CommitStatus",
    "Classification",
    "CommitOutcome",
    # Classifier
    "FAILURE_RULES",
    "ClassificationRule",
    "classify",
    "is_benign_warning_output",
    # Commit
    "commit",
]

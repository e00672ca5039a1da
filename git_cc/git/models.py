"""Commit attempt data models for git-cc.

Contains:
- CommitStatus: Classification labels for a commit attempt
- Classification: Reason label plus human-readable message
- CommitOutcome: Pydantic model describing one commit attempt
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class CommitStatus(str, Enum):
    """Result labels for a commit attempt."""

    COMMITTED = "committed"
    HOOK_FAILED = "hook_failed"
    NO_CHANGES = "no_changes"
    MERGE_CONFLICT = "merge_conflict"
    NOT_IN_REPO = "not_in_repo"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Classification:
    """Why a commit failed, as decided by the error classifier."""

    reason: CommitStatus
    message: str


class CommitOutcome(BaseModel):
    """Result of a single `git commit` invocation.

    Attributes:
        succeeded: Whether the commit was created.
        reason: Classification label for the attempt.
        message: Short human-readable summary.
        details: Raw combined stdout/stderr of the git process.
    """

    model_config = ConfigDict(frozen=True)

    succeeded: bool
    reason: CommitStatus
    message: str
    details: str = ""

    def get_details(self) -> str:
        """Get the text to show below the summary on the error screen.

        Returns:
            The raw output, or an empty string when it adds nothing
            beyond the summary message.
        """
        details = self.details.strip()
        if details == self.message:
            return ""
        return details

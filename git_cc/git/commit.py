"""Commit invoker.

Contains:
- commit: Run `git commit -m <message>` and describe the result
"""

import subprocess

from loguru import logger

from git_cc.git.classify import classify, is_benign_warning_output
from git_cc.git.models import CommitOutcome, CommitStatus

SUCCESS_MESSAGE = "Changes committed successfully"


def commit(message: str) -> CommitOutcome:
    """Create a commit with the given message in the current directory.

    Runs exactly one `git commit` and waits for it to exit. Standard error is
    folded into standard output so the captured text keeps git's ordering.
    Failures are returned as data, never raised.

    Args:
        message: The full commit message.

    Returns:
        The outcome of the attempt.
    """
    logger.debug("Committing with message: {!r}", message)
    try:
        result = subprocess.run(
            ["git", "commit", "-m", message],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except FileNotFoundError:
        logger.error("git executable not found")
        return CommitOutcome(
            succeeded=False,
            reason=CommitStatus.UNKNOWN,
            message="Git is not installed or not in PATH.",
        )

    output = result.stdout or ""

    if result.returncode == 0:
        logger.info("Commit created")
        return CommitOutcome(
            succeeded=True,
            reason=CommitStatus.COMMITTED,
            message=SUCCESS_MESSAGE,
        )

    if is_benign_warning_output(output):
        logger.warning(
            "git exited with status {} but only printed ignored warnings; treating as committed",
            result.returncode,
        )
        return CommitOutcome(
            succeeded=True,
            reason=CommitStatus.COMMITTED,
            message=SUCCESS_MESSAGE,
            details=output,
        )

    classification = classify(output)
    logger.info(
        "Commit failed with status {}: {}",
        result.returncode,
        classification.reason.value,
    )
    return CommitOutcome(
        succeeded=False,
        reason=classification.reason,
        message=classification.message,
        details=output,
    )

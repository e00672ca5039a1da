"""Classification of failed `git commit` output.

Contains:
- ClassificationRule: One ordered (patterns, reason, message) rule
- FAILURE_RULES: The rule table, evaluated top to bottom
- classify: Turn combined git output into a Classification
- is_benign_warning_output: Detect output made only of "(ignored)" warnings
"""

import re
from typing import NamedTuple

from git_cc.git.models import Classification, CommitStatus

IGNORED_MARKER = "(ignored)"
DEFAULT_FAILURE_MESSAGE = "Commit failed"

# Lines like "debug: ...", "INFO: ...", "[debug] ..." carry no failure reason
_DEBUG_INFO_PREFIX = re.compile(r"^\[?(debug|info)\b\]?", re.IGNORECASE)


class ClassificationRule(NamedTuple):
    """Map output containing any of `patterns` to a failure reason."""

    patterns: tuple[str, ...]
    reason: CommitStatus
    message: str

    def matches(self, lowered_output: str) -> bool:
        """Check the rule against already lower-cased output."""
        return any(pattern in lowered_output for pattern in self.patterns)


# First match wins, so order matters: hook output often mentions other causes
FAILURE_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        ("hook",),
        CommitStatus.HOOK_FAILED,
        "Pre-commit hook failed",
    ),
    ClassificationRule(
        ("nothing to commit",),
        CommitStatus.NO_CHANGES,
        "No changes to commit",
    ),
    ClassificationRule(
        ("merge conflict", "conflicts then run git commit"),
        CommitStatus.MERGE_CONFLICT,
        "Merge conflicts need to be resolved",
    ),
    ClassificationRule(
        ("not a git repository",),
        CommitStatus.NOT_IN_REPO,
        "Not in a git repository",
    ),
)


def _is_debug_or_info(line: str) -> bool:
    return bool(_DEBUG_INFO_PREFIX.match(line))


def _match_rule(output: str) -> ClassificationRule | None:
    lowered = output.lower()
    for rule in FAILURE_RULES:
        if rule.matches(lowered):
            return rule
    return None


def _first_meaningful_line(output: str) -> str:
    """Pick the line that best summarizes an unrecognized failure.

    Prefers the first non-empty line that is neither debug/info noise nor an
    "(ignored)" warning, then the raw first line, then a generic message.
    """
    for raw_line in output.splitlines():
        line = raw_line.strip()
        if not line or _is_debug_or_info(line) or IGNORED_MARKER in line.lower():
            continue
        return line

    if output:
        first_line = output.split("\n")[0].strip()
        if first_line:
            return first_line
    return DEFAULT_FAILURE_MESSAGE


def classify(output: str) -> Classification:
    """Classify the combined output of a failed `git commit`.

    Matching is case-insensitive and follows FAILURE_RULES in order; output
    matching no rule is reported as unknown with its first meaningful line.

    Args:
        output: Combined stdout and stderr of the git process.

    Returns:
        The reason label and a human-readable message.
    """
    rule = _match_rule(output)
    if rule is not None:
        return Classification(reason=rule.reason, message=rule.message)
    return Classification(
        reason=CommitStatus.UNKNOWN,
        message=_first_meaningful_line(output),
    )


def is_benign_warning_output(output: str) -> bool:
    """Check if failed-commit output only contains "(ignored)" warnings.

    Some tools exit non-zero after an otherwise successful commit while only
    printing advisory warnings. This is a heuristic: a genuine failure whose
    message happens to carry the marker is misread as success.

    Args:
        output: Combined stdout and stderr of the git process.

    Returns:
        True if no failure rule matches and every remaining non-empty line
        carries the "(ignored)" marker.
    """
    if _match_rule(output) is not None:
        return False

    lines = [
        line.strip()
        for line in output.splitlines()
        if line.strip() and not _is_debug_or_info(line.strip())
    ]
    if not lines:
        return False
    return all(IGNORED_MARKER in line.lower() for line in lines)

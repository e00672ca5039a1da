"""Conventional commit message formatting.

Format:
    <type>(<scope>): <description>
    <type>: <description>          (when scope is empty)
"""


def build_commit_message(commit_type: str, scope: str, message: str) -> str:
    """Build a conventional commit header.

    No validation is done here; git decides whether the result is
    acceptable.

    Args:
        commit_type: The change type tag (e.g. "feat").
        scope: Optional scope. Parenthesized only when non-empty.
        message: The commit description.

    Returns:
        The formatted commit message.
    """
    if scope:
        return f"{commit_type}({scope}): {message}"
    return f"{commit_type}: {message}"

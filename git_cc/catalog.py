"""Conventional commit type catalog.

Contains:
- ChangeType: A selectable commit type tag with its description
- CHANGE_TYPES: The ordered catalog shown on the type selection screen
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeType:
    """A conventional commit type.

    Attributes:
        tag: The type written before the colon (e.g. "feat").
        description: One-line explanation shown next to the tag.
    """

    tag: str
    description: str

    def filter_value(self) -> str:
        """Text matched against the type selection filter."""
        return f"{self.tag} {self.description}"


# Ordered as presented to the user
CHANGE_TYPES: tuple[ChangeType, ...] = (
    ChangeType("feat", "A new feature"),
    ChangeType("fix", "A bug fix"),
    ChangeType("docs", "Documentation only changes"),
    ChangeType("style", "Changes that do not affect the meaning of the code"),
    ChangeType("refactor", "A code change that neither fixes a bug nor adds a feature"),
    ChangeType("perf", "A code change that improves performance"),
    ChangeType("test", "Adding missing tests or correcting existing tests"),
    ChangeType("build", "Changes that affect the build system or external dependencies"),
    ChangeType("ci", "Changes to CI configuration files and scripts"),
    ChangeType("chore", "Other changes that don't modify src or test files"),
)


def filter_change_types(
    query: str, catalog: tuple[ChangeType, ...] = CHANGE_TYPES
) -> list[ChangeType]:
    """Filter the catalog by a case-insensitive substring.

    Matches are ranked: tags starting with the query first, then tags
    containing it, then description-only matches. Each group keeps catalog
    order.

    Args:
        query: Filter text typed by the user. Empty matches everything.
        catalog: The change types to filter.

    Returns:
        Matching change types, best match first.
    """
    needle = query.lower()
    ranked = []
    for index, item in enumerate(catalog):
        tag = item.tag.lower()
        if tag.startswith(needle):
            rank = 0
        elif needle in tag:
            rank = 1
        elif needle in item.filter_value().lower():
            rank = 2
        else:
            continue
        ranked.append((rank, index, item))
    return [item for _, _, item in sorted(ranked, key=lambda entry: entry[:2])]

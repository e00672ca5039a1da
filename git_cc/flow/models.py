"""Data models for the commit wizard flow.

Contains:
- Step: The four screens of the wizard
- Effect: Side effects a transition asks its host to perform
- KeyPress: Toolkit-independent key event
- FlowState: Immutable snapshot of the wizard
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from git_cc.catalog import CHANGE_TYPES, ChangeType, filter_change_types
from git_cc.git.models import CommitOutcome
from git_cc.message import build_commit_message

DEFAULT_SCOPE_CHAR_LIMIT = 50
DEFAULT_MESSAGE_CHAR_LIMIT = 100


class Step(Enum):
    """Screens of the commit wizard, in the order they are visited."""

    TYPE_SELECT = "type_select"
    SCOPE = "scope"
    MESSAGE = "message"
    ERROR = "error"


class Effect(Enum):
    """Follow-up action requested by a transition."""

    NONE = "none"
    COMMIT = "commit"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyPress:
    """A single key event.

    Key names follow Textual's conventions ("enter", "up", "ctrl+c", "a").

    Attributes:
        key: Name of the key that was pressed.
        character: The printable character produced, if any.
    """

    key: str
    character: Optional[str] = None

    @classmethod
    def of(cls, key: str) -> "KeyPress":
        """Build a key event, treating single-character keys as printable."""
        return cls(key=key, character=key if len(key) == 1 else None)

    @property
    def is_printable(self) -> bool:
        return self.character is not None and self.character.isprintable()


@dataclass(frozen=True)
class FlowState:
    """Everything the wizard knows at one point in time.

    Transitions never mutate a FlowState; they return a new one.
    """

    step: Step = Step.TYPE_SELECT
    catalog: tuple[ChangeType, ...] = CHANGE_TYPES
    filter_text: str = ""
    cursor: int = 0
    scope: str = ""
    message: str = ""
    outcome: Optional[CommitOutcome] = None
    show_error: bool = False
    committing: bool = False
    scope_char_limit: int = DEFAULT_SCOPE_CHAR_LIMIT
    message_char_limit: int = DEFAULT_MESSAGE_CHAR_LIMIT

    @property
    def visible_types(self) -> list[ChangeType]:
        """Change types matching the current filter."""
        return filter_change_types(self.filter_text, self.catalog)

    @property
    def selected_type(self) -> Optional[ChangeType]:
        """The highlighted change type, or None when nothing matches."""
        visible = self.visible_types
        if not visible:
            return None
        return visible[min(self.cursor, len(visible) - 1)]

    @property
    def header_prefix(self) -> str:
        """The `type(scope): ` prefix shown in front of the message input."""
        selected = self.selected_type
        commit_type = selected.tag if selected else ""
        return build_commit_message(commit_type, self.scope, "")

    @property
    def commit_message(self) -> str:
        """The full conventional commit message for the current input."""
        selected = self.selected_type
        commit_type = selected.tag if selected else ""
        return build_commit_message(commit_type, self.scope, self.message)

"""State machine driving the commit wizard.

Contains:
- transition: Pure (FlowState, KeyPress) -> (FlowState, Effect) function
- apply_outcome: Fold a commit attempt's result back into the state
- CommitFlow: A wizard session owning its state and committer
"""

from dataclasses import replace
from typing import Callable, Optional

from loguru import logger

from git_cc.catalog import CHANGE_TYPES, ChangeType
from git_cc.flow.models import (
    DEFAULT_MESSAGE_CHAR_LIMIT,
    DEFAULT_SCOPE_CHAR_LIMIT,
    Effect,
    FlowState,
    KeyPress,
    Step,
)
from git_cc.flow.view import render_view
from git_cc.git.commit import commit as git_commit
from git_cc.git.models import CommitOutcome

ABORT_KEY = "ctrl+c"
ESCAPE_KEY = "escape"
ENTER_KEY = "enter"
RETRY_KEY = "r"
QUIT_KEY = "q"
FILTER_CHAR_LIMIT = 64

Transition = tuple[FlowState, Effect]


def _edit_text(value: str, key: KeyPress, limit: int) -> Optional[str]:
    """Apply a text-editing key to a single-line field.

    Returns:
        The edited value, or None if the key does not edit text.
    """
    if key.key == "backspace":
        return value[:-1]
    if key.key == "ctrl+u":
        return ""
    if key.is_printable:
        if len(value) >= limit:
            return value
        return value + key.character
    return None


def _on_type_select(state: FlowState, key: KeyPress) -> Transition:
    if key.key == ENTER_KEY:
        if state.selected_type is None:
            return state, Effect.NONE
        return replace(state, step=Step.SCOPE), Effect.NONE

    if key.key == "up":
        return replace(state, cursor=max(state.cursor - 1, 0)), Effect.NONE

    if key.key == "down":
        last = max(len(state.visible_types) - 1, 0)
        return replace(state, cursor=min(state.cursor + 1, last)), Effect.NONE

    edited = _edit_text(state.filter_text, key, FILTER_CHAR_LIMIT)
    if edited is None or edited == state.filter_text:
        return state, Effect.NONE
    return replace(state, filter_text=edited, cursor=0), Effect.NONE


def _on_scope(state: FlowState, key: KeyPress) -> Transition:
    if key.key == ENTER_KEY:
        return replace(state, step=Step.MESSAGE), Effect.NONE

    edited = _edit_text(state.scope, key, state.scope_char_limit)
    if edited is None:
        return state, Effect.NONE
    return replace(state, scope=edited), Effect.NONE


def _on_message(state: FlowState, key: KeyPress) -> Transition:
    if key.key == ENTER_KEY:
        if not state.message.strip():
            return state, Effect.NONE
        return replace(state, committing=True), Effect.COMMIT

    edited = _edit_text(state.message, key, state.message_char_limit)
    if edited is None:
        return state, Effect.NONE
    return replace(state, message=edited), Effect.NONE


def _on_error(state: FlowState, key: KeyPress) -> Transition:
    if key.key == RETRY_KEY and state.show_error:
        return replace(state, step=Step.MESSAGE, show_error=False), Effect.NONE
    if key.key == QUIT_KEY:
        return state, Effect.QUIT
    return state, Effect.NONE


_STEP_HANDLERS: dict[Step, Callable[[FlowState, KeyPress], Transition]] = {
    Step.TYPE_SELECT: _on_type_select,
    Step.SCOPE: _on_scope,
    Step.MESSAGE: _on_message,
    Step.ERROR: _on_error,
}


def transition(state: FlowState, key: KeyPress) -> Transition:
    """Compute the wizard's reaction to one key press.

    ctrl+c aborts from every step, even while a commit is running. Escape
    aborts too, except that on the type list it first clears a filter.
    While a commit is outstanding every other key is ignored.

    Args:
        state: The current state.
        key: The key that was pressed.

    Returns:
        The next state and the effect the host should perform.
    """
    if key.key == ABORT_KEY:
        return state, Effect.QUIT

    if state.committing:
        return state, Effect.NONE

    if key.key == ESCAPE_KEY:
        if state.step is Step.TYPE_SELECT and state.filter_text:
            return replace(state, filter_text="", cursor=0), Effect.NONE
        return state, Effect.QUIT

    return _STEP_HANDLERS[state.step](state, key)


def apply_outcome(state: FlowState, outcome: CommitOutcome) -> Transition:
    """Record a commit attempt's outcome.

    Args:
        state: The state that requested the commit.
        outcome: Result of the attempt.

    Returns:
        QUIT on success; otherwise the error screen and no effect.
    """
    state = replace(state, committing=False, outcome=outcome)
    if outcome.succeeded:
        return state, Effect.QUIT
    return replace(state, step=Step.ERROR, show_error=True), Effect.NONE


class CommitFlow:
    """One run of the commit wizard.

    The host feeds key presses to `handle` and performs the returned effect:
    COMMIT means call `commit`, QUIT means end the session.
    """

    def __init__(
        self,
        committer: Callable[[str], CommitOutcome] = git_commit,
        catalog: tuple[ChangeType, ...] = CHANGE_TYPES,
        scope_char_limit: int = DEFAULT_SCOPE_CHAR_LIMIT,
        message_char_limit: int = DEFAULT_MESSAGE_CHAR_LIMIT,
    ):
        self.state = FlowState(
            catalog=catalog,
            scope_char_limit=scope_char_limit,
            message_char_limit=message_char_limit,
        )
        self.finished = False
        self._committer = committer

    @property
    def outcome(self) -> Optional[CommitOutcome]:
        """The most recent commit outcome, if any attempt was made."""
        return self.state.outcome

    @property
    def committed(self) -> bool:
        """Whether the session ended with a successful commit."""
        return self.outcome is not None and self.outcome.succeeded

    def view(self) -> str:
        """Render the current screen as Rich markup."""
        return render_view(self.state)

    def handle(self, key: KeyPress) -> Effect:
        """Process one key press.

        Args:
            key: The key that was pressed.

        Returns:
            The effect the host should perform next.
        """
        if self.finished:
            return Effect.QUIT

        self.state, effect = transition(self.state, key)
        if effect is Effect.QUIT:
            logger.debug("Session aborted on step {}", self.state.step.value)
            self.finished = True
        return effect

    def commit(self) -> Effect:
        """Run the outstanding commit attempt.

        Blocks until the committer returns. Does nothing unless the last
        handled key requested a commit.

        Returns:
            QUIT if the commit succeeded, otherwise NONE.
        """
        if self.finished or not self.state.committing:
            return Effect.NONE

        message = self.state.commit_message
        logger.debug("Attempting commit: {}", message)
        outcome = self._committer(message)
        self.state, effect = apply_outcome(self.state, outcome)
        if effect is Effect.QUIT:
            self.finished = True
        return effect

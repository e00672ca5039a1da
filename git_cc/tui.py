"""Terminal host for the commit wizard.

Runs a CommitFlow inside a Textual application: key presses are translated
into KeyPress events, the flow's rendered screen is shown in a single
Static widget, and requested effects are carried out here.
"""

from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from git_cc.flow import CommitFlow, Effect, KeyPress
from git_cc.git.models import CommitOutcome


class CommitWizardApp(App[Optional[CommitOutcome]]):
    """Full-screen app hosting one commit wizard session.

    The app's return value is the successful CommitOutcome, or None when
    the user aborted.
    """

    CSS = """
    #view {
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "abort", "Quit", show=False, priority=True),
    ]

    def __init__(self, flow: CommitFlow):
        super().__init__()
        self.flow = flow

    def compose(self) -> ComposeResult:
        yield Static(Text.from_markup(self.flow.view()), id="view")

    def _refresh_view(self) -> None:
        self.query_one("#view", Static).update(Text.from_markup(self.flow.view()))

    def _finish(self) -> None:
        self.exit(self.flow.outcome if self.flow.committed else None)

    def _perform(self, effect: Effect) -> None:
        self._refresh_view()
        if effect is Effect.QUIT:
            self._finish()
        elif effect is Effect.COMMIT:
            # Paint the "Committing..." screen before blocking on git
            self.call_after_refresh(self._run_commit)

    def _run_commit(self) -> None:
        self._perform(self.flow.commit())

    def action_abort(self) -> None:
        """Abort the session without committing."""
        self._perform(self.flow.handle(KeyPress("ctrl+c")))

    def on_key(self, event: events.Key) -> None:
        key = KeyPress(
            key=event.key,
            character=event.character if event.is_printable else None,
        )
        self._perform(self.flow.handle(key))

"""Tests for git_cc.tui module."""

import asyncio

from textual.widgets import Static

from git_cc.flow import CommitFlow, Step
from git_cc.tui import CommitWizardApp


def run_app(flow, *keys):
    """Drive the app headlessly with the given key presses."""

    async def scenario():
        app = CommitWizardApp(flow)
        async with app.run_test() as pilot:
            for key in keys:
                await pilot.press(key)
                # Leave time for a commit scheduled after the next refresh
                await pilot.pause(0.05)
            rendered = app.query_one("#view", Static).content.plain if app.is_running else None
        return app.return_value, rendered

    return asyncio.run(scenario())


class TestCommitWizardApp:
    """Tests for the Textual host."""

    def test_commits_and_exits(self, recording_committer, successful_outcome):
        """Test a full run ending in a commit."""
        committer = recording_committer(successful_outcome)
        flow = CommitFlow(committer=committer)

        result, _ = run_app(flow, "enter", "c", "l", "i", "enter", "a", "space", "b", "enter")

        assert result == successful_outcome
        assert committer.messages == ["feat(cli): a b"]
        assert flow.finished is True

    def test_failure_shows_error_screen(self, recording_committer, hook_failure_outcome):
        """Test that a failed commit keeps the app on the error screen."""
        committer = recording_committer(hook_failure_outcome)
        flow = CommitFlow(committer=committer)

        _, rendered = run_app(flow, "enter", "enter", "x", "enter")

        assert flow.state.step is Step.ERROR
        assert "Commit Failed!" in rendered

    def test_retry_then_quit(self, recording_committer, hook_failure_outcome):
        """Test retrying from the error screen, then quitting."""
        committer = recording_committer(hook_failure_outcome)
        flow = CommitFlow(committer=committer)

        result, _ = run_app(flow, "enter", "enter", "x", "enter", "r", "escape")

        assert result is None
        assert flow.state.step is Step.MESSAGE
        assert flow.state.message == "x"
        assert committer.messages == ["feat: x"]

    def test_ctrl_c_aborts(self, recording_committer):
        """Test that ctrl+c exits without committing."""
        committer = recording_committer()
        flow = CommitFlow(committer=committer)

        result, _ = run_app(flow, "down", "ctrl+c")

        assert result is None
        assert flow.finished is True
        assert committer.messages == []

"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from pathlib import Path

import pytest

from git_cc.flow import CommitFlow
from git_cc.git.models import CommitOutcome, CommitStatus


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def completed_process():
    """Factory for fake subprocess.run results."""

    def _make(returncode=0, stdout=""):
        return subprocess.CompletedProcess(
            args=["git"], returncode=returncode, stdout=stdout, stderr=None
        )

    return _make


@pytest.fixture
def successful_outcome():
    """A commit outcome for a created commit."""
    return CommitOutcome(
        succeeded=True,
        reason=CommitStatus.COMMITTED,
        message="Changes committed successfully",
    )


@pytest.fixture
def hook_failure_outcome():
    """A commit outcome for a rejected pre-commit hook."""
    return CommitOutcome(
        succeeded=False,
        reason=CommitStatus.HOOK_FAILED,
        message="Pre-commit hook failed",
        details="black....................Failed\nhook id: black\n",
    )


class RecordingCommitter:
    """Fake committer that records messages and replays outcomes."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        return self.outcomes.pop(0)


@pytest.fixture
def recording_committer():
    """Build a RecordingCommitter returning the given outcomes in order."""
    return RecordingCommitter


@pytest.fixture
def make_flow():
    """Build a CommitFlow wired to a fake committer."""

    def _make(committer, **kwargs):
        return CommitFlow(committer=committer, **kwargs)

    return _make

"""Tests for git_cc.cli module."""

import pytest
from typer.testing import CliRunner

from git_cc.cli import app
from git_cc.config import ConfigError, WizardConfig
from git_cc.git import GitError, NoStagedChangesError, NotInRepositoryError


runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(mocker):
    """Keep the CLI from reconfiguring loguru during tests."""
    return mocker.patch("git_cc.cli.main.setup_logging")


@pytest.fixture
def default_config(mocker):
    """Load defaults instead of the user's config file."""
    return mocker.patch("git_cc.cli.main.load_config", return_value=WizardConfig())


class TestVersionFlag:
    """Tests for git-cc --version."""

    def test_prints_version(self, mocker):
        """Test that version information is printed."""
        mocker.patch("git_cc.cli.main.get_git_version", return_value="2.43.0")
        mock_check = mocker.patch("git_cc.cli.main.ensure_staged_changes")
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")

        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "git-cc" in result.output
        assert "Git: 2.43.0" in result.output
        mock_check.assert_not_called()
        mock_app.assert_not_called()


class TestMainCommand:
    """Tests for the default git-cc command."""

    def test_shows_help(self):
        """Test that help is displayed."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "conventional commit" in result.output
        assert "--version" in result.output

    def test_not_in_repository(self, mocker, default_config):
        """Test exit status outside a git repository."""
        mocker.patch(
            "git_cc.cli.main.ensure_staged_changes",
            side_effect=NotInRepositoryError(
                "not a git repository (or any of the parent directories): .git"
            ),
        )
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Error: not a git repository" in result.output
        mock_app.assert_not_called()

    def test_no_staged_files(self, mocker, default_config):
        """Test exit status when nothing is staged."""
        mocker.patch(
            "git_cc.cli.main.ensure_staged_changes",
            side_effect=NoStagedChangesError(
                "No staged files found. Stage files with 'git add' first."
            ),
        )
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "No staged files found" in result.output
        mock_app.assert_not_called()

    def test_git_status_error(self, mocker, default_config):
        """Test exit status when the index cannot be read."""
        mocker.patch(
            "git_cc.cli.main.ensure_staged_changes",
            side_effect=GitError("Git command failed: git diff --cached --name-only"),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Error checking git status" in result.output

    def test_config_error(self, mocker):
        """Test exit status for an invalid config file."""
        mocker.patch("git_cc.cli.main.load_config", side_effect=ConfigError("bad yaml"))

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_successful_commit(self, mocker, default_config, successful_outcome):
        """Test the output after a successful wizard run."""
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.return_value = successful_outcome

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Commit successful!" in result.output
        mock_app.return_value.run.assert_called_once()

    def test_cancelled(self, mocker, default_config):
        """Test the output when the wizard is aborted."""
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.return_value = None

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Commit cancelled." in result.output

    def test_wizard_crash(self, mocker, default_config):
        """Test the output when the terminal app fails."""
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.side_effect = RuntimeError("no tty")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Error running program: no tty" in result.output

    def test_config_limits_reach_flow(self, mocker):
        """Test that configured character limits are passed to the flow."""
        mocker.patch(
            "git_cc.cli.main.load_config",
            return_value=WizardConfig(scope_char_limit=10, message_char_limit=20),
        )
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.return_value = None

        runner.invoke(app, [])

        flow = mock_app.call_args[0][0]
        assert flow.state.scope_char_limit == 10
        assert flow.state.message_char_limit == 20

    def test_debug_flag_sets_log_level(self, mocker, default_config, quiet_logging, temp_dir):
        """Test that --debug and --log-file configure logging."""
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.return_value = None
        log_file = temp_dir / "git-cc.log"

        runner.invoke(app, ["--debug", "--log-file", str(log_file)])

        quiet_logging.assert_called_once_with(log_level="DEBUG", log_file=log_file)

    def test_debug_without_log_file_writes_to_file(self, mocker, default_config, quiet_logging, temp_dir):
        """Test that --debug alone keeps log output off the terminal."""
        mocker.patch("git_cc.config._CONFIG_DIR", temp_dir)
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.return_value = None

        runner.invoke(app, ["--debug"])

        quiet_logging.assert_called_once_with(
            log_level="DEBUG", log_file=temp_dir / "git-cc.log"
        )

    def test_default_logging_stays_on_stderr(self, mocker, default_config, quiet_logging):
        """Test that without --debug no log file is chosen."""
        mocker.patch("git_cc.cli.main.ensure_staged_changes", return_value=["a.py"])
        mock_app = mocker.patch("git_cc.cli.main.CommitWizardApp")
        mock_app.return_value.run.return_value = None

        runner.invoke(app, [])

        quiet_logging.assert_called_once_with(log_level="WARNING", log_file=None)

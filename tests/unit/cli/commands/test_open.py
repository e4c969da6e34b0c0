"""Tests for the open command."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from testfinder.cli.main import cli
from testfinder.exceptions import FileOpenError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.unit
class TestOpenCommand:
    """Test opening the test file for a source file."""

    @patch("testfinder.cli.selection.FileOpener.open")
    def test_single_match_opens(self, mock_open, runner, repo_root, make_files):
        make_files(["test/controllers/widgets_controller_test.rb"])

        result = runner.invoke(
            cli, ["open", str(repo_root / "app/controllers/widgets_controller.rb")]
        )

        assert result.exit_code == 0, result.output
        mock_open.assert_called_once_with(
            repo_root / "test/controllers/widgets_controller_test.rb", beside=False
        )

    @patch("testfinder.cli.selection.FileOpener.open")
    def test_beside(self, mock_open, runner, repo_root, make_files):
        make_files(["test/unit/lib/queue_test.rb"])

        result = runner.invoke(
            cli, ["open", str(repo_root / "lib/queue.rb"), "--beside"]
        )

        assert result.exit_code == 0, result.output
        mock_open.assert_called_once_with(repo_root / "test/unit/lib/queue_test.rb", beside=True)

    @patch("testfinder.cli.selection.FileOpener.open")
    def test_no_match(self, mock_open, runner, repo_root):
        result = runner.invoke(cli, ["open", str(repo_root / "app/models/person.rb")])

        assert result.exit_code == 0
        assert "No test files found" in result.output
        mock_open.assert_not_called()

    @patch("testfinder.cli.selection.Prompt.ask", return_value="2")
    @patch("testfinder.cli.selection.FileOpener.open")
    def test_multiple_matches_prompt(self, mock_open, mock_ask, runner, repo_root, make_files):
        make_files(["test/models/person_test.rb", "test/unit/person_test.rb"])

        result = runner.invoke(cli, ["open", str(repo_root / "app/models/person.rb")])

        assert result.exit_code == 0, result.output
        assert "1  test/models/person_test.rb" in result.output
        assert "2  test/unit/person_test.rb" in result.output
        mock_open.assert_called_once_with(repo_root / "test/unit/person_test.rb", beside=False)

    @patch("testfinder.cli.selection.Prompt.ask", return_value="")
    @patch("testfinder.cli.selection.FileOpener.open")
    def test_cancelled_selection(self, mock_open, mock_ask, runner, repo_root, make_files):
        make_files(["test/models/person_test.rb", "test/unit/person_test.rb"])

        result = runner.invoke(cli, ["open", str(repo_root / "app/models/person.rb")])

        assert result.exit_code == 0
        mock_open.assert_not_called()

    @patch("testfinder.cli.selection.subprocess.run")
    def test_configured_command(self, mock_run, runner, repo_root, make_files, monkeypatch):
        monkeypatch.setenv("TESTFINDER_OPEN_COMMAND", "myeditor --goto {path}")
        make_files(["test/unit/lib/queue_test.rb"])

        result = runner.invoke(cli, ["open", str(repo_root / "lib/queue.rb")])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(
            ["myeditor", "--goto", str(repo_root / "test/unit/lib/queue_test.rb")], check=True
        )

    @patch("testfinder.cli.selection.FileOpener.open")
    def test_open_failure_exit_code(self, mock_open, runner, repo_root, make_files):
        mock_open.side_effect = FileOpenError("x", "command not found")
        make_files(["test/unit/lib/queue_test.rb"])

        result = runner.invoke(cli, ["open", str(repo_root / "lib/queue.rb")])

        assert result.exit_code == 9

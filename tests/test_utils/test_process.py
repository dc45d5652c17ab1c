"""Tests for command execution."""

import subprocess
from unittest.mock import patch

import pytest

from floki.errors import CommandLaunchError
from floki.utils.process import CommandResult, run_command


class TestCommandResult:
    """Test CommandResult."""

    def test_success(self):
        result = CommandResult(args=["docker"], returncode=0)

        assert result.success is True
        assert result.signal is None
        assert result.describe() == "exited with status 0"

    def test_failure(self):
        result = CommandResult(args=["docker"], returncode=2)

        assert result.success is False
        assert result.describe() == "exited with status 2"

    def test_killed_by_signal(self):
        result = CommandResult(args=["docker"], returncode=-9)

        assert result.success is False
        assert result.signal == 9
        assert result.describe() == "terminated by signal 9"

    def test_exit_status(self):
        status = CommandResult(args=["docker"], returncode=1).exit_status("docker build")

        assert status.process_description == "docker build"
        assert str(status) == "docker build exited with status 1"


class TestRunCommand:
    """Test run_command."""

    @patch("floki.utils.process.subprocess.run")
    def test_inherits_streams(self, mock_run):
        """Test output goes to the user by default."""
        mock_run.return_value = subprocess.CompletedProcess(["docker", "pull", "x"], 0)

        result = run_command(["docker", "pull", "x"])

        assert result.success
        mock_run.assert_called_once_with(
            ["docker", "pull", "x"], stdin=None, stdout=None, stderr=None
        )

    @patch("floki.utils.process.subprocess.run")
    def test_quiet_suppresses_streams(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(["docker"], 1)

        result = run_command(["docker", "history", "x"], quiet=True)

        assert result.returncode == 1
        mock_run.assert_called_once_with(
            ["docker", "history", "x"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    @patch("floki.utils.process.subprocess.run")
    def test_arguments_are_strings(self, mock_run, tmp_path):
        mock_run.return_value = subprocess.CompletedProcess([], 0)

        result = run_command(["docker", "build", tmp_path])

        assert result.args == ["docker", "build", str(tmp_path)]

    def test_missing_executable(self):
        """Test a missing binary is a launch error."""
        with pytest.raises(CommandLaunchError) as exc_info:
            run_command(["floki-definitely-not-a-real-binary", "history"])

        assert isinstance(exc_info.value.error, OSError)
        assert exc_info.value.command[0] == "floki-definitely-not-a-real-binary"

    def test_real_exit_code(self):
        """Test the exit code of a real process is reported."""
        result = run_command(["sh", "-c", "exit 3"], quiet=True)

        assert result.returncode == 3
        assert not result.success

"""Tests for launching the downstream command."""

import subprocess
from unittest.mock import patch

import pytest

from session_resumer.errors import CommandNotFoundError, LaunchError
from session_resumer.launcher import ExecLauncher, SpawnLauncher, select_launcher


class TestSelectLauncher:
    """Tests for launcher selection."""

    def test_exec_mode(self):
        launcher = select_launcher("claude", "exec")
        assert isinstance(launcher, ExecLauncher)
        assert launcher.command == "claude"

    def test_spawn_mode(self):
        assert isinstance(select_launcher("claude", "spawn"), SpawnLauncher)

    def test_auto_posix(self):
        with patch("session_resumer.launcher.supports_exec", return_value=True):
            assert isinstance(select_launcher("claude"), ExecLauncher)

    def test_auto_without_exec(self):
        with patch("session_resumer.launcher.supports_exec", return_value=False):
            assert isinstance(select_launcher("claude"), SpawnLauncher)

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown launch mode"):
            select_launcher("claude", "fork")


class TestExecLauncher:
    """Tests for process replacement."""

    def test_execvp_arguments(self):
        with patch("session_resumer.launcher.os.execvp") as execvp:
            ExecLauncher("claude").launch(["-r", "abc", "--verbose"])
        execvp.assert_called_once_with("claude", ["claude", "-r", "abc", "--verbose"])

    def test_not_found(self):
        with patch("session_resumer.launcher.os.execvp", side_effect=FileNotFoundError()):
            with pytest.raises(CommandNotFoundError) as exc_info:
                ExecLauncher("claude").launch([])
        assert exc_info.value.exit_code == 127
        assert exc_info.value.command == "claude"

    def test_other_failure(self):
        with patch("session_resumer.launcher.os.execvp", side_effect=PermissionError("denied")):
            with pytest.raises(LaunchError) as exc_info:
                ExecLauncher("claude").launch([])
        assert not isinstance(exc_info.value, CommandNotFoundError)
        assert exc_info.value.exit_code == 1


class TestSpawnLauncher:
    """Tests for spawn-and-wait."""

    def test_returns_exit_status(self):
        completed = subprocess.CompletedProcess(args=[], returncode=3)
        with patch("session_resumer.launcher.subprocess.run", return_value=completed) as run:
            assert SpawnLauncher("claude").launch(["--session-id", "abc"]) == 3
        run.assert_called_once_with(["claude", "--session-id", "abc"])

    def test_not_found(self):
        with pytest.raises(CommandNotFoundError):
            SpawnLauncher("claude-does-not-exist-xyz").launch([])

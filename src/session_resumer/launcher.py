#!/usr/bin/env python3
"""
Launcher for cs

Starts the downstream command with a prepared argument vector. Two
variants share one interface:
- ExecLauncher replaces the cs process (POSIX), never returning on success
- SpawnLauncher runs the command as a child and returns its exit status

select_launcher() picks the variant from the configured mode and the
platform's capabilities.
"""

import logging
import os
import subprocess
from abc import ABC, abstractmethod

from .errors import CommandNotFoundError, LaunchError

logger = logging.getLogger(__name__)

LAUNCH_MODES = ("auto", "exec", "spawn")


class Launcher(ABC):
    """Runs a command with arguments."""

    def __init__(self, command: str = "claude"):
        """
        Initialize the launcher.

        Args:
            command: Executable name or path
        """
        self.command = command

    def _not_found(self) -> CommandNotFoundError:
        return CommandNotFoundError(
            f"'{self.command}' not found in PATH", command=self.command
        )

    @abstractmethod
    def launch(self, args: list[str]) -> int:
        """
        Launch the command.

        Args:
            args: Arguments after the command name

        Returns:
            Exit status of the command

        Raises:
            CommandNotFoundError: If the command is not on the search path
            LaunchError: If the command cannot be started
        """


class ExecLauncher(Launcher):
    """Replaces the current process with the command."""

    def launch(self, args: list[str]) -> int:
        argv = [self.command] + list(args)
        logger.debug("exec %s", argv)
        try:
            os.execvp(self.command, argv)
        except FileNotFoundError as e:
            raise self._not_found() from e
        except OSError as e:
            raise LaunchError(
                f"Error launching {self.command}: {e}", command=self.command
            ) from e
        return 0  # unreachable unless os.execvp is patched


class SpawnLauncher(Launcher):
    """Runs the command as a child process and waits for it."""

    def launch(self, args: list[str]) -> int:
        argv = [self.command] + list(args)
        logger.debug("spawn %s", argv)
        try:
            result = subprocess.run(argv)
        except FileNotFoundError as e:
            raise self._not_found() from e
        except OSError as e:
            raise LaunchError(
                f"Error launching {self.command}: {e}", command=self.command
            ) from e
        return result.returncode


def supports_exec() -> bool:
    """Check if the platform can replace the running process."""
    return os.name == "posix" and hasattr(os, "execvp")


def select_launcher(command: str = "claude", mode: str = "auto") -> Launcher:
    """
    Choose a launcher variant.

    Args:
        command: Executable to launch
        mode: "exec", "spawn", or "auto" (exec where supported)

    Returns:
        Launcher instance

    Raises:
        ValueError: If mode is not one of LAUNCH_MODES
    """
    if mode not in LAUNCH_MODES:
        raise ValueError(f"Unknown launch mode: {mode!r}. Expected one of {', '.join(LAUNCH_MODES)}")

    if mode == "exec" or (mode == "auto" and supports_exec()):
        return ExecLauncher(command)
    return SpawnLauncher(command)

"""
Exceptions for cs.

Every failure that ends a run is raised as a subclass of
SessionResumerError and mapped to an exit code by the CLI.
"""


class SessionResumerError(Exception):
    """Base exception for cs errors."""

    exit_code = 1


class WorkspaceError(SessionResumerError):
    """Raised when the workspace name or a required git branch cannot be determined."""
    pass


class RegistryError(SessionResumerError):
    """Raised when the session registry cannot be cleared."""
    pass


class LaunchError(SessionResumerError):
    """Raised when the downstream command cannot be started."""

    def __init__(self, message: str, command: str | None = None):
        """
        Initialize launch error.

        Args:
            message: Error message
            command: Command that failed to launch
        """
        super().__init__(message)
        self.command = command


class CommandNotFoundError(LaunchError):
    """Raised when the downstream command is not on the search path."""

    exit_code = 127

#!/usr/bin/env python3
"""
Workspace Context for cs

Looks up the two inputs of a session name: the current folder name and,
when the folder is inside a git repository, the checked-out branch.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import WorkspaceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkspaceContext:
    """Folder name and optional git branch of the current workspace."""

    folder: str
    branch: str | None = None

    @property
    def session_name(self) -> str:
        """Return "<folder>+<branch>", or just the folder outside git."""
        if self.branch:
            return f"{self.folder}+{self.branch}"
        return self.folder

    @property
    def has_branch(self) -> bool:
        return bool(self.branch)


def get_folder_name(cwd: Path | None = None) -> str:
    """
    Get the name of the current working directory.

    Args:
        cwd: Directory to use instead of the process working directory

    Returns:
        Final path component

    Raises:
        WorkspaceError: If the directory or its name cannot be determined
    """
    try:
        directory = Path(cwd) if cwd else Path.cwd()
    except OSError as e:
        raise WorkspaceError(f"Failed to get current directory: {e}") from e

    name = directory.name
    if not name:
        raise WorkspaceError(f"Failed to get folder name for {directory}")
    return name


def _run_git_command(
    args: list[str],
    cwd: Path | None = None,
    git: str = "git",
) -> subprocess.CompletedProcess:
    """
    Run a git command and capture its output.

    Args:
        args: Git command arguments (without 'git')
        cwd: Working directory for the command
        git: Git executable

    Returns:
        CompletedProcess instance
    """
    return subprocess.run(
        [git] + args,
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )


def get_git_branch(cwd: Path | None = None, git: str = "git") -> str | None:
    """
    Get the current git branch.

    Args:
        cwd: Directory to query (defaults to the process working directory)
        git: Git executable

    Returns:
        Branch name, or None when git is unavailable or cwd is not a repository
    """
    try:
        result = _run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd, git=git)
    except FileNotFoundError:
        logger.debug("git executable %r not found", git)
        return None
    except subprocess.CalledProcessError as e:
        logger.debug("Not a git repository or no branch found: %s", (e.stderr or "").strip())
        return None
    except OSError as e:
        logger.debug("Failed to execute git: %s", e)
        return None

    branch = result.stdout.strip()
    return branch or None


def detect_workspace(
    cwd: Path | None = None,
    require_branch: bool = False,
    git: str = "git",
) -> WorkspaceContext:
    """
    Build the workspace context for a directory.

    Args:
        cwd: Directory to inspect (defaults to the process working directory)
        require_branch: Fail instead of falling back to folder-only names
        git: Git executable

    Returns:
        WorkspaceContext

    Raises:
        WorkspaceError: If the folder name cannot be determined, or no branch
            is found while require_branch is set
    """
    folder = get_folder_name(cwd)
    branch = get_git_branch(cwd, git=git)
    if branch is None and require_branch:
        raise WorkspaceError("Not a git repository or no branch found")
    return WorkspaceContext(folder=folder, branch=branch)

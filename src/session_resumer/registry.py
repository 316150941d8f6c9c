#!/usr/bin/env python3
"""
Session Registry for cs

A plain text file listing the session identifiers cs has created,
one per line. The registry is advisory bookkeeping: reads, appends and
removals degrade to empty/no-op on I/O errors, and only clear() reports
failures to the caller.

Default location:
- Windows: %APPDATA%/cs/sessions
- Unix/macOS: ~/.cs/sessions
"""

import logging
import os
import sys
from pathlib import Path

from .errors import RegistryError

logger = logging.getLogger(__name__)

REGISTRY_FILE = "sessions"


def get_data_dir() -> Path:
    """
    Get the platform-specific data directory for cs.

    Returns:
        Path to the data directory:
        - Windows: %APPDATA%/cs
        - Unix/macOS: ~/.cs
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "cs"
        return Path.home() / "AppData" / "Roaming" / "cs"
    return Path.home() / ".cs"


def default_registry_path() -> Path:
    """Return the default registry file path."""
    return get_data_dir() / REGISTRY_FILE


class SessionRegistry:
    """
    File-backed set of known session identifiers.

    No locking is done: concurrent invocations that read then write
    (remove, or a contains check followed by save) may lose an update.
    Duplicate lines in the file are harmless since load() returns a set.

    Attributes:
        path: Path to the registry file.
    """

    def __init__(self, path: Path | None = None):
        """
        Initialize the registry.

        Args:
            path: Registry file path. Defaults to default_registry_path().
        """
        self.path = Path(path) if path else default_registry_path()

    def load(self) -> set[str]:
        """
        Load all identifiers from the registry.

        Returns:
            Set of identifiers. Empty when the file is missing or unreadable.
        """
        sessions: set[str] = set()
        try:
            with open(self.path, encoding="utf-8") as f:
                for line in f:
                    session_id = line.strip()
                    if session_id:
                        sessions.add(session_id)
        except FileNotFoundError:
            return set()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read session registry %s: %s", self.path, e)
            return set()
        return sessions

    def contains(self, session_id: str) -> bool:
        """Check whether an identifier is registered."""
        return session_id in self.load()

    def __contains__(self, session_id: str) -> bool:
        return self.contains(session_id)

    def save(self, session_id: str) -> None:
        """
        Append an identifier to the registry.

        Creates the parent directory when needed. Does not check for an
        existing entry; callers check contains() first.

        Args:
            session_id: Identifier to record
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{session_id}\n")
        except OSError as e:
            logger.debug("Could not save session %s to %s: %s", session_id, self.path, e)

    def remove(self, session_id: str) -> None:
        """
        Remove every entry matching an identifier.

        The remaining entries are rewritten once each, in first-seen order.
        A missing file or unknown identifier is a no-op.

        Args:
            session_id: Identifier to remove
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read session registry %s: %s", self.path, e)
            return

        seen: set[str] = set()
        remaining: list[str] = []
        for line in content.splitlines():
            entry = line.strip()
            if not entry or entry == session_id or entry in seen:
                continue
            seen.add(entry)
            remaining.append(entry)

        new_content = "".join(f"{entry}\n" for entry in remaining)
        try:
            self.path.write_text(new_content, encoding="utf-8")
        except OSError as e:
            logger.debug("Could not rewrite session registry %s: %s", self.path, e)

    def clear(self) -> bool:
        """
        Delete the registry file.

        Returns:
            True if a file was deleted, False if the registry was already empty

        Raises:
            RegistryError: If the file exists but cannot be deleted
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise RegistryError(f"Error clearing session database {self.path}: {e}") from e
        logger.debug("Deleted session registry %s", self.path)
        return True

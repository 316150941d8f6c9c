"""
Settings data model for cs.

Settings is resolved once per invocation (see storage.load_settings) and
passed explicitly to the identity deriver, the registry and the launcher.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """
    Settings for cs.

    Attributes:
        namespace: Namespace override for session identifiers (32 hex digits,
            hyphens optional). Empty or malformed means the DNS namespace.
        db_path: Registry file path. None means the platform default.
        claude_command: Executable launched for sessions.
        launch_mode: "auto", "exec" or "spawn".
        require_branch: Fail outside git instead of using folder-only names.
    """

    namespace: str = ""
    db_path: Optional[Path] = None
    claude_command: str = "claude"
    launch_mode: str = "auto"
    require_branch: bool = False

"""
Settings management module for cs.

This module provides:
- The Settings data model
- YAML-based configuration storage
- CS_* environment variable overrides
"""

from .models import Settings
from .storage import (
    ENV_CLAUDE_COMMAND,
    ENV_CONFIG_DIR,
    ENV_DB_PATH,
    ENV_LAUNCH_MODE,
    ENV_NAMESPACE,
    ENV_REQUIRE_BRANCH,
    SettingsStorage,
    apply_env_overrides,
    load_settings,
)

__all__ = [
    # Models
    "Settings",
    # Storage
    "SettingsStorage",
    "apply_env_overrides",
    "load_settings",
    # Environment variables
    "ENV_NAMESPACE",
    "ENV_DB_PATH",
    "ENV_CLAUDE_COMMAND",
    "ENV_LAUNCH_MODE",
    "ENV_REQUIRE_BRANCH",
    "ENV_CONFIG_DIR",
]

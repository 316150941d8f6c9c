"""
Settings storage for cs.

This module provides:
- YAML-based settings file loading (~/.cs/config.yaml by default)
- Environment variable overrides (CS_*), which take priority over the file
- Default Settings when no configuration exists

Precedence:
1. Environment variables
2. config.yaml
3. Default values
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..launcher import LAUNCH_MODES
from ..registry import get_data_dir
from .models import Settings

logger = logging.getLogger(__name__)

ENV_NAMESPACE = "CS_NAMESPACE"
ENV_DB_PATH = "CS_DB_PATH"
ENV_CLAUDE_COMMAND = "CS_CLAUDE_COMMAND"
ENV_LAUNCH_MODE = "CS_LAUNCH_MODE"
ENV_REQUIRE_BRANCH = "CS_REQUIRE_BRANCH"
ENV_CONFIG_DIR = "CS_CONFIG_DIR"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


class SettingsStorage:
    """
    Settings storage manager.

    Handles loading Settings objects from a YAML file.

    Attributes:
        config_dir: Directory holding the settings file.
        config_file: Path to config.yaml.
    """

    CONFIG_FILE = "config.yaml"

    def __init__(self, config_dir: Path | None = None) -> None:
        """
        Initialize the settings storage.

        Args:
            config_dir: Optional configuration directory. Defaults to the
                cs data directory (~/.cs).
        """
        self.config_dir = Path(config_dir) if config_dir else get_data_dir()
        self.config_file = self.config_dir / self.CONFIG_FILE

    def load(self) -> Settings:
        """
        Load settings from the configuration file.

        Returns:
            Settings from the file, or defaults if the file is missing or
            cannot be parsed.
        """
        if not self.config_file.exists():
            return Settings()

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.config_file}: {e}")
            return Settings()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings file {self.config_file}: expected a mapping")
            return Settings()

        return self._dict_to_settings(data)

    def _dict_to_settings(self, data: dict[str, Any]) -> Settings:
        db_path = data.get("db_path")
        return Settings(
            namespace=str(data.get("namespace") or ""),
            db_path=Path(db_path).expanduser() if db_path else None,
            claude_command=str(data.get("claude_command") or "claude"),
            launch_mode=_normalize_launch_mode(data.get("launch_mode")),
            require_branch=_parse_bool(data.get("require_branch", False)),
        )


def _normalize_launch_mode(value: Any) -> str:
    if not value:
        return "auto"
    mode = str(value).strip().lower()
    if mode not in LAUNCH_MODES:
        logger.warning(f"Unknown launch mode {value!r}, using 'auto'")
        return "auto"
    return mode


def apply_env_overrides(settings: Settings, environ: Mapping[str, str]) -> Settings:
    """
    Overlay CS_* environment variables onto settings.

    Args:
        settings: Settings loaded from file (modified in place)
        environ: Environment mapping

    Returns:
        The updated settings
    """
    if environ.get(ENV_NAMESPACE):
        settings.namespace = environ[ENV_NAMESPACE]
    if environ.get(ENV_DB_PATH):
        settings.db_path = Path(environ[ENV_DB_PATH])
    if environ.get(ENV_CLAUDE_COMMAND):
        settings.claude_command = environ[ENV_CLAUDE_COMMAND]
    if environ.get(ENV_LAUNCH_MODE):
        settings.launch_mode = _normalize_launch_mode(environ[ENV_LAUNCH_MODE])
    if ENV_REQUIRE_BRANCH in environ:
        settings.require_branch = _parse_bool(environ[ENV_REQUIRE_BRANCH])
    return settings


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Resolve settings for this invocation.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings with environment overrides applied over config.yaml
    """
    environ = os.environ if environ is None else environ
    config_dir = environ.get(ENV_CONFIG_DIR)
    storage = SettingsStorage(Path(config_dir) if config_dir else None)
    return apply_env_overrides(storage.load(), environ)

"""Pytest configuration and fixtures for cs tests."""

import pytest

from session_resumer.registry import SessionRegistry

CS_ENV_VARS = (
    "CS_NAMESPACE",
    "CS_DB_PATH",
    "CS_CLAUDE_COMMAND",
    "CS_LAUNCH_MODE",
    "CS_REQUIRE_BRANCH",
    "CS_CONFIG_DIR",
    "CS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.cs directory and CS_* settings."""
    for name in CS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_dir = tmp_path / "cs-config"
    monkeypatch.setenv("CS_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("CS_DB_PATH", str(tmp_path / "cs-data" / "sessions"))
    return config_dir


@pytest.fixture
def registry_path(tmp_path):
    """Registry file path inside the temp directory (not created)."""
    return tmp_path / "cs-data" / "sessions"


@pytest.fixture
def registry(registry_path):
    """Empty SessionRegistry backed by a temp file."""
    return SessionRegistry(registry_path)


@pytest.fixture
def workspace_dir(tmp_path):
    """A project folder to run cs from."""
    project = tmp_path / "my-project"
    project.mkdir()
    return project

"""Tests for settings storage and environment overrides."""

from pathlib import Path

from session_resumer.settings import Settings, SettingsStorage, apply_env_overrides, load_settings


class TestSettingsStorage:
    """Tests for YAML settings persistence."""

    def test_defaults_when_missing(self, tmp_path):
        assert SettingsStorage(tmp_path).load() == Settings()

    def test_full_file(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "namespace: 12345678-1234-1234-1234-123456789012\n"
            f"db_path: {tmp_path / 'db'}\n"
            "claude_command: /opt/claude/bin/claude\n"
            "launch_mode: spawn\n"
            "require_branch: true\n"
        )
        assert SettingsStorage(tmp_path).load() == Settings(
            namespace="12345678-1234-1234-1234-123456789012",
            db_path=tmp_path / "db",
            claude_command="/opt/claude/bin/claude",
            launch_mode="spawn",
            require_branch=True,
        )

    def test_partial_file(self, tmp_path):
        (tmp_path / "config.yaml").write_text("claude_command: claude-beta\n")
        settings = SettingsStorage(tmp_path).load()
        assert settings.claude_command == "claude-beta"
        assert settings.launch_mode == "auto"
        assert settings.db_path is None

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "config.yaml").write_text("claude_command: [unclosed\n")
        assert SettingsStorage(tmp_path).load() == Settings()

    def test_non_mapping(self, tmp_path):
        (tmp_path / "config.yaml").write_text("- a\n- b\n")
        assert SettingsStorage(tmp_path).load() == Settings()

    def test_invalid_launch_mode(self, tmp_path):
        (tmp_path / "config.yaml").write_text("launch_mode: teleport\n")
        assert SettingsStorage(tmp_path).load().launch_mode == "auto"

    def test_require_branch_string(self, tmp_path):
        (tmp_path / "config.yaml").write_text("require_branch: 'yes'\n")
        assert SettingsStorage(tmp_path).load().require_branch is True


class TestEnvOverrides:
    """Environment variables take priority over the file."""

    def test_all_overrides(self):
        settings = apply_env_overrides(
            Settings(),
            {
                "CS_NAMESPACE": "ns",
                "CS_DB_PATH": "/tmp/cs-db",
                "CS_CLAUDE_COMMAND": "claude-dev",
                "CS_LAUNCH_MODE": "SPAWN",
                "CS_REQUIRE_BRANCH": "1",
            },
        )
        assert settings.namespace == "ns"
        assert settings.db_path == Path("/tmp/cs-db")
        assert settings.claude_command == "claude-dev"
        assert settings.launch_mode == "spawn"
        assert settings.require_branch is True

    def test_empty_values_ignored(self):
        settings = apply_env_overrides(Settings(claude_command="x"), {"CS_CLAUDE_COMMAND": ""})
        assert settings.claude_command == "x"

    def test_require_branch_false(self):
        settings = apply_env_overrides(Settings(require_branch=True), {"CS_REQUIRE_BRANCH": "0"})
        assert settings.require_branch is False

    def test_env_beats_file(self, tmp_path):
        (tmp_path / "config.yaml").write_text("claude_command: from-file\nlaunch_mode: exec\n")
        settings = load_settings({"CS_CONFIG_DIR": str(tmp_path), "CS_CLAUDE_COMMAND": "from-env"})
        assert settings.claude_command == "from-env"
        assert settings.launch_mode == "exec"

    def test_uses_os_environ(self, isolated_env, monkeypatch):
        isolated_env.mkdir(parents=True)
        (isolated_env / "config.yaml").write_text("namespace: from-file\n")
        monkeypatch.setenv("CS_NAMESPACE", "from-env")
        assert load_settings().namespace == "from-env"

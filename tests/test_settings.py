"""
Tests for settings loading.
"""

import pytest

from construction.core.settings import SETTINGS_PATH, Settings, SettingsError, load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "missing.yaml")
        assert settings == Settings()
        assert settings.build_delay_seconds == 1.0
        assert settings.clear_screen is True

    def test_reads_yaml_file(self, tmp_path):
        path = tmp_path / "construction.yaml"
        path.write_text("build_delay_seconds: 0.25\nclear_screen: false\n")
        settings = load_settings(path)
        assert settings.build_delay_seconds == 0.25
        assert settings.clear_screen is False

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "construction.yaml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_malformed_yaml_rejected(self, tmp_path):
        path = tmp_path / "construction.yaml"
        path.write_text("build_delay_seconds: [1, 2\n")
        with pytest.raises(SettingsError, match="Invalid settings file"):
            load_settings(path)

    def test_non_mapping_file_rejected(self, tmp_path):
        path = tmp_path / "construction.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(SettingsError, match="mapping"):
            load_settings(path)

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "construction.yaml"
        path.write_text("build_delay_seconds: 2\n")
        monkeypatch.setenv("CONSTRUCTION_BUILD_DELAY", "0")
        monkeypatch.setenv("CONSTRUCTION_CLEAR_SCREEN", "false")
        settings = load_settings(path)
        assert settings.build_delay_seconds == 0.0
        assert settings.clear_screen is False

    def test_blank_environment_value_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CONSTRUCTION_BUILD_DELAY", "  ")
        assert load_settings(tmp_path / "missing.yaml").build_delay_seconds == 1.0

    @pytest.mark.parametrize("value", ["-1", "60", "soon"])
    def test_invalid_delay_rejected(self, tmp_path, monkeypatch, value):
        monkeypatch.setenv("CONSTRUCTION_BUILD_DELAY", value)
        with pytest.raises(SettingsError, match="Invalid settings"):
            load_settings(tmp_path / "missing.yaml")

    def test_shipped_settings_file_is_valid(self):
        assert load_settings(SETTINGS_PATH).build_delay_seconds >= 0

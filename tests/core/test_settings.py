"""Tests for core.settings module.

Covers:
- RecordSpineSettings defaults
- Environment variable override with the RECORD_SPINE_ prefix
- Validation and the cached get_settings()
"""

import pytest

from record_spine.core.errors import ConfigError
from record_spine.core.settings import RecordSpineSettings, get_settings, reset_settings


class TestDefaults:
    def test_processing_defaults(self):
        s = RecordSpineSettings()
        assert s.ready is True
        assert s.max_attempts == 3
        assert s.attempt_delay == 30.0

    def test_logging_defaults(self):
        s = RecordSpineSettings()
        assert s.log_level == "INFO"
        assert s.json_logs is None
        assert s.service == "record-spine"


class TestEnvOverride:
    def test_ready_from_env(self, monkeypatch):
        monkeypatch.setenv("RECORD_SPINE_READY", "false")
        assert RecordSpineSettings().ready is False

    def test_attempts_and_delay_from_env(self, monkeypatch):
        monkeypatch.setenv("RECORD_SPINE_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("RECORD_SPINE_ATTEMPT_DELAY", "0.5")
        s = RecordSpineSettings()
        assert s.max_attempts == 5
        assert s.attempt_delay == 0.5

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("MAX_ATTEMPTS", "9")
        assert RecordSpineSettings().max_attempts == 3

    def test_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("RECORD_SPINE_MAX_ATTEMPTS=7\n")
        monkeypatch.chdir(tmp_path)
        assert RecordSpineSettings().max_attempts == 7


class TestValidation:
    def test_log_level_normalized(self):
        assert RecordSpineSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            RecordSpineSettings(log_level="chatty")

    @pytest.mark.parametrize("field, value", [("max_attempts", -1), ("attempt_delay", -0.1)])
    def test_negative_values_rejected(self, field, value):
        with pytest.raises(ValueError):
            RecordSpineSettings(**{field: value})


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("RECORD_SPINE_MAX_ATTEMPTS", "1")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.max_attempts == 1

    def test_invalid_env_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("RECORD_SPINE_MAX_ATTEMPTS", "many")
        with pytest.raises(ConfigError):
            get_settings()

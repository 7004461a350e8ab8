"""Tests for the configuration module."""

import pytest
from pydantic import SecretStr, ValidationError

from tapo_power.config import Settings, require_credentials
from tapo_power.exceptions import ConfigurationError


@pytest.mark.usefixtures("clean_env")
class TestSettingsDefaults:
    """Test that all settings have sensible defaults."""

    def test_general_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.METER_MODE == "production"

    def test_tapo_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.TAPO_USERNAME == ""
        assert settings.TAPO_PASSWORD.get_secret_value() == ""
        assert settings.TAPO_DEVICE_MODEL == "p115"

    def test_sampling_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.POLL_INTERVAL == 1.0
        assert settings.SAMPLE_COUNT == 10
        assert settings.WINDOW_SIZE == 100
        assert settings.CHART_WIDTH == 200
        assert settings.CHART_HEIGHT == 50

    def test_password_is_secret(self):
        settings = Settings(_env_file=None, TAPO_PASSWORD="super_secret_password")
        assert isinstance(settings.TAPO_PASSWORD, SecretStr)
        assert "super_secret_password" not in repr(settings)


@pytest.mark.usefixtures("clean_env")
class TestSettingsValidation:
    """Test that validation rules work correctly."""

    def test_log_level_validation(self):
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            assert Settings(_env_file=None, LOG_LEVEL=level).LOG_LEVEL == level

        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="INVALID")

    def test_meter_mode_validation(self):
        for mode in ["production", "mock"]:
            assert Settings(_env_file=None, METER_MODE=mode).METER_MODE == mode

        with pytest.raises(ValidationError):
            Settings(_env_file=None, METER_MODE="simulation")

    def test_device_model_validation(self):
        assert Settings(_env_file=None, TAPO_DEVICE_MODEL="p110").TAPO_DEVICE_MODEL == "p110"

        with pytest.raises(ValidationError):
            Settings(_env_file=None, TAPO_DEVICE_MODEL="l530")

    def test_poll_interval_positive(self):
        assert Settings(_env_file=None, POLL_INTERVAL=0.5).POLL_INTERVAL == 0.5

        with pytest.raises(ValidationError):
            Settings(_env_file=None, POLL_INTERVAL=0)

    def test_sample_count_minimum(self):
        assert Settings(_env_file=None, SAMPLE_COUNT=1).SAMPLE_COUNT == 1

        with pytest.raises(ValidationError):
            Settings(_env_file=None, SAMPLE_COUNT=0)

    def test_window_size_minimum(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, WINDOW_SIZE=0)


@pytest.mark.usefixtures("clean_env")
class TestSettingsEnvironmentLoading:
    """Test that settings load from environment variables."""

    def test_settings_load_from_env(self, monkeypatch):
        monkeypatch.setenv("TAPO_USERNAME", "user@example.com")
        monkeypatch.setenv("TAPO_PASSWORD", "secret123")
        monkeypatch.setenv("SAMPLE_COUNT", "25")

        settings = Settings(_env_file=None)

        assert settings.TAPO_USERNAME == "user@example.com"
        assert settings.TAPO_PASSWORD.get_secret_value() == "secret123"
        assert settings.SAMPLE_COUNT == 25

    def test_settings_load_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TAPO_USERNAME=file@example.com\nWINDOW_SIZE=42\n")

        settings = Settings(_env_file=env_file)

        assert settings.TAPO_USERNAME == "file@example.com"
        assert settings.WINDOW_SIZE == 42


@pytest.mark.usefixtures("clean_env")
class TestRequireCredentials:
    def test_complete_credentials(self):
        settings = Settings(_env_file=None, TAPO_USERNAME="user", TAPO_PASSWORD="pw")
        require_credentials(settings)

    def test_missing_both(self):
        with pytest.raises(ConfigurationError, match="TAPO_USERNAME, TAPO_PASSWORD"):
            require_credentials(Settings(_env_file=None))

    def test_error_names_the_failing_step(self):
        with pytest.raises(ConfigurationError, match="^Getting Tapo credentials from the environment"):
            require_credentials(Settings(_env_file=None))

    def test_missing_password(self):
        settings = Settings(_env_file=None, TAPO_USERNAME="user")
        with pytest.raises(ConfigurationError) as exc_info:
            require_credentials(settings)

        assert "TAPO_PASSWORD" in str(exc_info.value)
        assert "TAPO_USERNAME" not in str(exc_info.value)

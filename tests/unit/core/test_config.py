"""Unit tests for environment settings."""

import pytest

from maxcon_exporter.core.config import DEFAULT_AWS_API_INTERVAL, load_settings
from maxcon_exporter.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("AWS_API_INTERVAL", "AWS_REGION", "METRICS_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestAwsApiInterval:
    def test_defaults_to_300(self):
        assert load_settings().AWS_API_INTERVAL == DEFAULT_AWS_API_INTERVAL == 300

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_API_INTERVAL", "60")

        assert load_settings().AWS_API_INTERVAL == 60

    def test_empty_value_means_default(self, monkeypatch):
        monkeypatch.setenv("AWS_API_INTERVAL", "")

        assert load_settings().AWS_API_INTERVAL == 300

    @pytest.mark.parametrize("value", ["abc", "1.5m", "0", "-10"])
    def test_invalid_value_is_config_error(self, monkeypatch, value):
        monkeypatch.setenv("AWS_API_INTERVAL", value)

        with pytest.raises(ConfigError, match="AWS_API_INTERVAL"):
            load_settings()


class TestOtherSettings:
    def test_defaults(self):
        settings = load_settings()

        assert settings.METRICS_PORT == 8080
        assert settings.METRICS_HOST == "0.0.0.0"
        assert settings.AWS_REGION is None
        assert settings.POLL_ON_STARTUP is True

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert load_settings().LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("value", ["VERBOSE", "trace", ""])
    def test_unknown_log_level_is_config_error(self, monkeypatch, value):
        monkeypatch.setenv("LOG_LEVEL", value)

        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            load_settings()

    def test_empty_region_is_unset(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "")

        assert load_settings().AWS_REGION is None

    def test_invalid_port_is_config_error(self, monkeypatch):
        monkeypatch.setenv("METRICS_PORT", "http")

        with pytest.raises(ConfigError):
            load_settings()

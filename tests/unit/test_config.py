"""Tests for controller configuration."""

from __future__ import annotations

import pytest

from s3_bucket_controller.config import ControllerConfig, get_config

ENV_VARS = (
    "S3_REGION",
    "S3_ENDPOINT",
    "S3_PATH_STYLE",
    "S3_MAX_ATTEMPTS",
    "S3_CREDENTIALS_SECRET_NAME",
    "S3_CREDENTIALS_SECRET_NAMESPACE",
    "S3_ACCESS_KEY_FIELD",
    "S3_SECRET_KEY_FIELD",
    "S3_SESSION_TOKEN_FIELD",
    "METRICS_PORT",
    "DRIFT_CHECK_INTERVAL_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestControllerConfig:
    """Test cases for ControllerConfig."""

    def test_defaults(self):
        """Test configuration with no environment set."""
        controller_config = ControllerConfig.from_env()

        assert controller_config == ControllerConfig()
        assert controller_config.region == "us-east-1"
        assert controller_config.endpoint is None
        assert controller_config.path_style is True
        assert controller_config.credentials_secret_name is None
        assert controller_config.session_token_field is None
        assert controller_config.drift_check_interval_seconds == 300

    def test_from_env(self, monkeypatch):
        """Test configuration read from the environment."""
        monkeypatch.setenv("S3_REGION", "eu-west-1")
        monkeypatch.setenv("S3_ENDPOINT", "https://s3.example.com")
        monkeypatch.setenv("S3_PATH_STYLE", "false")
        monkeypatch.setenv("S3_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("S3_CREDENTIALS_SECRET_NAME", "s3-credentials")
        monkeypatch.setenv("S3_CREDENTIALS_SECRET_NAMESPACE", "s3-system")
        monkeypatch.setenv("S3_SESSION_TOKEN_FIELD", "session-token")
        monkeypatch.setenv("METRICS_PORT", "9090")
        monkeypatch.setenv("DRIFT_CHECK_INTERVAL_SECONDS", "60")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        controller_config = ControllerConfig.from_env()

        assert controller_config.region == "eu-west-1"
        assert controller_config.endpoint == "https://s3.example.com"
        assert controller_config.path_style is False
        assert controller_config.max_attempts == 5
        assert controller_config.credentials_secret_name == "s3-credentials"
        assert controller_config.credentials_secret_namespace == "s3-system"
        assert controller_config.session_token_field == "session-token"
        assert controller_config.metrics_port == 9090
        assert controller_config.drift_check_interval_seconds == 60
        assert controller_config.log_level == "DEBUG"

    def test_empty_region_uses_default(self, monkeypatch):
        """Test that an empty region falls back to the default."""
        monkeypatch.setenv("S3_REGION", "")

        assert ControllerConfig.from_env().region == "us-east-1"

    def test_get_config_cached(self):
        """Test that configuration is read once per process."""
        get_config.cache_clear()
        try:
            assert get_config() is get_config()
        finally:
            get_config.cache_clear()

"""
Tests for runtime configuration.
"""

import logging

import pytest

from storefront.utils.config import Config, ConfigError, get_config


class TestConfig:
    """Test Config environment handling."""

    def test_defaults(self):
        """Test defaults when no variable is set."""
        config = Config({})

        assert config.environment == "development"
        assert config.port == 8080
        assert config.import_timeout == 60.0
        assert config.database_url.startswith("sqlite:///")
        assert config.database_url.endswith("/data/storefront.db")
        assert not config.is_production

    def test_overrides(self):
        """Test every variable is read."""
        config = Config(
            {
                "STOREFRONT_ENV": "production",
                "STOREFRONT_DATABASE_URL": "postgresql://h/catalog",
                "STOREFRONT_HOST": "127.0.0.1",
                "STOREFRONT_PORT": "9000",
                "STOREFRONT_IMPORT_TIMEOUT": "12.5",
            }
        )

        assert config.is_production
        assert config.database_url == "postgresql://h/catalog"
        assert config.host == "127.0.0.1"
        assert config.port == 9000
        assert config.import_timeout == 12.5

    @pytest.mark.parametrize(
        "environment,expected",
        [
            ("development", logging.DEBUG),
            ("staging", logging.DEBUG),
            ("production", logging.INFO),
        ],
    )
    def test_fromenv_log_level(self, environment, expected):
        """Test "fromenv" follows the runtime environment."""
        config = Config({"STOREFRONT_ENV": environment, "STOREFRONT_LOG_LEVEL": "fromenv"})

        assert config.log_level == expected

    def test_named_log_level(self):
        """Test a level name is used as-is."""
        assert Config({"STOREFRONT_LOG_LEVEL": "warning"}).log_level == logging.WARNING

    def test_unknown_log_level(self):
        """Test an unknown level name is rejected."""
        with pytest.raises(ConfigError):
            Config({"STOREFRONT_LOG_LEVEL": "chatty"}).log_level

    def test_invalid_port(self):
        """Test a non-numeric port is rejected."""
        with pytest.raises(ConfigError, match="STOREFRONT_PORT"):
            Config({"STOREFRONT_PORT": "http"}).port

    def test_invalid_port_does_not_affect_timeout(self):
        """Test an unusable port only fails when the port is read."""
        config = Config({"STOREFRONT_PORT": "http", "STOREFRONT_IMPORT_TIMEOUT": "5"})

        assert config.import_timeout == 5.0

    def test_invalid_timeout(self):
        """Test a non-numeric import timeout is rejected."""
        with pytest.raises(ConfigError, match="STOREFRONT_IMPORT_TIMEOUT"):
            Config({"STOREFRONT_IMPORT_TIMEOUT": "soon"}).import_timeout

    def test_get_config_is_fresh(self, monkeypatch):
        """Test get_config() re-reads the environment every call."""
        monkeypatch.setenv("STOREFRONT_ENV", "staging")
        first = get_config()
        monkeypatch.setenv("STOREFRONT_ENV", "production")
        second = get_config()

        assert first is not second
        assert first.environment == "staging"
        assert second.environment == "production"

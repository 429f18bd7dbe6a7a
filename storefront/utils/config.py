"""
Configuration management for the storefront catalog backend.

This module handles:
- Runtime environment (development, staging, production)
- Log level resolution
- Database URL for the read API
- HTTP server settings
- Import deadlines

Every setting is read from environment variables when the Config is
created; nothing is cached at module level.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import APP_NAME, APP_VERSION, DEFAULT_IMPORT_TIMEOUT

# Environments where "fromenv" resolves to DEBUG logging
VERBOSE_ENVIRONMENTS = {"development", "staging"}

LOG_LEVEL_FROM_ENV = "fromenv"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    pass


class Config:
    """
    Application configuration manager.

    Handles all configuration settings read from the environment.
    """

    def __init__(self, environ: Optional[dict] = None):
        """
        Initialize configuration.

        Args:
            environ: Mapping to read settings from (default: os.environ)
        """
        env = os.environ if environ is None else environ

        self.environment = env.get("STOREFRONT_ENV", "development")
        self._log_level = env.get("STOREFRONT_LOG_LEVEL", LOG_LEVEL_FROM_ENV)
        self._database_url = env.get("STOREFRONT_DATABASE_URL")
        self.host = env.get("STOREFRONT_HOST", "0.0.0.0")
        self._env = env

    @staticmethod
    def _parse_int(env, key: str, default: int) -> int:
        raw = env.get(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigError(f"{key} must be an integer, got '{raw}'") from e

    @staticmethod
    def _parse_float(env, key: str, default: float) -> float:
        raw = env.get(key)
        if raw is None or raw == "":
            return default
        try:
            return float(raw)
        except ValueError as e:
            raise ConfigError(f"{key} must be a number, got '{raw}'") from e

    @property
    def app_name(self) -> str:
        """Application name."""
        return APP_NAME

    @property
    def app_version(self) -> str:
        """Application version."""
        return APP_VERSION

    @property
    def port(self) -> int:
        """
        API listen port.

        Raises:
            ConfigError: If STOREFRONT_PORT is not an integer
        """
        return self._parse_int(self._env, "STOREFRONT_PORT", 8080)

    @property
    def import_timeout(self) -> float:
        """
        Default import run timeout in seconds.

        Raises:
            ConfigError: If STOREFRONT_IMPORT_TIMEOUT is not a number
        """
        return self._parse_float(self._env, "STOREFRONT_IMPORT_TIMEOUT", DEFAULT_IMPORT_TIMEOUT)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy database URL.

        Returns:
            STOREFRONT_DATABASE_URL, or a SQLite file under the project data/ directory
        """
        if self._database_url:
            return self._database_url
        project_root = Path(__file__).parent.parent.parent
        db_path_str = str(project_root / "data" / "storefront.db").replace("\\", "/")
        return f"sqlite:///{db_path_str}"

    @property
    def log_level(self) -> int:
        """
        Resolve the configured log level.

        "fromenv" means DEBUG in development/staging and INFO elsewhere;
        any other value must be a standard logging level name.

        Raises:
            ConfigError: If the level name is unknown
        """
        if self._log_level.lower() == LOG_LEVEL_FROM_ENV:
            if self.environment in VERBOSE_ENVIRONMENTS:
                return logging.DEBUG
            return logging.INFO

        level = logging.getLevelName(self._log_level.upper())
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level '{self._log_level}'")
        return level

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(environment='{self.environment}', database_url='{self.database_url}')"


def get_config(environ: Optional[dict] = None) -> Config:
    """
    Build a configuration from the environment.

    A new Config is returned on every call so callers can thread it
    explicitly instead of sharing process-wide state.

    Args:
        environ: Optional mapping to read instead of os.environ

    Returns:
        Config instance
    """
    return Config(environ)

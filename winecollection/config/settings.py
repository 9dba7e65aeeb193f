"""Global settings instance for Wine Collection.

This module provides a unified settings object that combines:
- Configuration from config.toml
- Secrets from secrets.env
- Environment variable overrides
"""

import logging
from pathlib import Path

from winecollection.config.loader import load_config, load_secrets
from winecollection.config.schema import SecretsConfig, WineCollectionConfig

logger = logging.getLogger(__name__)


class Settings:
    """Unified settings object combining config and secrets.

    Exposes a flat property interface over the structured
    WineCollectionConfig and SecretsConfig.
    """

    def __init__(
        self,
        config: WineCollectionConfig | None = None,
        secrets: SecretsConfig | None = None,
    ):
        """Initialize settings.

        Args:
            config: Optional WineCollectionConfig instance. If not provided, loads from file.
            secrets: Optional SecretsConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()
        self._secrets = secrets or load_secrets()

    @property
    def config(self) -> WineCollectionConfig:
        """Get the full configuration object."""
        return self._config

    @property
    def secrets(self) -> SecretsConfig:
        """Get the secrets configuration object."""
        return self._secrets

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def debug(self) -> bool:
        return self._config.server.debug

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def cors_origins(self) -> list[str]:
        return self._config.server.cors_origins

    # Database
    @property
    def database_url(self) -> str:
        """Connection URL; a secret URL wins over the configured one."""
        return self._secrets.database_url or self._config.database.url

    @property
    def database_echo(self) -> bool:
        return self._config.database.echo

    @property
    def create_tables(self) -> bool:
        return self._config.database.create_tables

    # Storage
    @property
    def data_dir(self) -> Path:
        return self._config.storage.data_dir

    @property
    def log_dir(self) -> Path:
        return self._config.storage.log_dir

    @property
    def pid_file(self) -> Path:
        return self._config.storage.pid_file

    @property
    def log_file(self) -> Path:
        return self._config.storage.log_file

    # Logging
    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_format(self) -> str:
        return self._config.logging.format


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object that lazily loads settings on first access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()

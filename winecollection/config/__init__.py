"""Wine Collection configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/winecollection/config.toml (user config)
4. /etc/winecollection/config.toml (system config)

Secrets are loaded from secrets.env files in the same directories.
"""

from winecollection.config.schema import (
    DatabaseConfig,
    LoggingConfig,
    SecretsConfig,
    ServerConfig,
    StorageConfig,
    WineCollectionConfig,
)
from winecollection.config.settings import get_settings, reset_settings, settings

__all__ = [
    "DatabaseConfig",
    "LoggingConfig",
    "SecretsConfig",
    "ServerConfig",
    "StorageConfig",
    "WineCollectionConfig",
    "get_settings",
    "reset_settings",
    "settings",
]

"""Configuration loader for Wine Collection.

Loads configuration from TOML files and secrets from .env files.
Environment variables can override any configuration value.
"""

import logging
import os
from pathlib import Path
from typing import Any

from winecollection.config.schema import SecretsConfig, WineCollectionConfig

logger = logging.getLogger(__name__)

# Try to import tomllib (Python 3.11+) or fall back to tomli
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found]

ENV_PREFIX = "WINECOLLECTION"

INT_KEYS = ("port",)
BOOL_KEYS = ("debug", "echo", "create_tables")
LIST_KEYS = ("cors_origins",)


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/winecollection/config.toml (user config)
    3. /etc/winecollection/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "winecollection" / "config.toml",
        Path("/etc/winecollection/config.toml"),
    ]


def get_secrets_search_paths() -> list[Path]:
    """Get the list of paths to search for secrets files.

    Returns paths in priority order (first found wins):
    1. ./secrets.env (project root - for development)
    2. ~/.config/winecollection/secrets.env (user secrets)
    3. /etc/winecollection/secrets.env (system secrets)
    """
    return [
        Path.cwd() / "secrets.env",
        Path.home() / ".config" / "winecollection" / "secrets.env",
        Path("/etc/winecollection/secrets.env"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def find_secrets_file() -> Path | None:
    """Find the first existing secrets file from search paths."""
    for path in get_secrets_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found secrets file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse a simple .env file into a dictionary.

    Supports:
    - KEY=value
    - KEY="quoted value"
    - # comments
    - Empty lines
    """
    env_vars: dict[str, str] = {}

    with open(path) as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip()

            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]

            env_vars[key] = value

    return env_vars


def _convert_value(key: str, value: str) -> Any:
    if key in INT_KEYS:
        return int(value)
    if key in BOOL_KEYS:
        return value.lower() in ("true", "1", "yes")
    if key in LIST_KEYS:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = ENV_PREFIX) -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - WINECOLLECTION_SERVER_HOST -> config_dict["server"]["host"]
    - WINECOLLECTION_DATABASE_ECHO -> config_dict["database"]["echo"]
    - etc.

    Note: This modifies config_dict in place.
    """
    env_mappings = {
        # Server
        f"{prefix}_SERVER_HOST": ("server", "host"),
        f"{prefix}_SERVER_PORT": ("server", "port"),
        f"{prefix}_SERVER_DEBUG": ("server", "debug"),
        f"{prefix}_SERVER_CORS_ORIGINS": ("server", "cors_origins"),
        f"{prefix}_DEBUG": ("server", "debug"),  # Shorthand
        f"{prefix}_HOST": ("server", "host"),  # Shorthand
        f"{prefix}_PORT": ("server", "port"),  # Shorthand
        # Database
        f"{prefix}_DATABASE_ECHO": ("database", "echo"),
        f"{prefix}_DATABASE_CREATE_TABLES": ("database", "create_tables"),
        # Storage
        f"{prefix}_STORAGE_DATA_DIR": ("storage", "data_dir"),
        f"{prefix}_STORAGE_LOG_DIR": ("storage", "log_dir"),
        # Logging
        f"{prefix}_LOGGING_LEVEL": ("logging", "level"),
        f"{prefix}_LOG_LEVEL": ("logging", "level"),  # Shorthand
    }

    for env_var, path in env_mappings.items():
        value = os.environ.get(env_var)
        if value is None:
            continue

        section, key = path
        if section not in config_dict:
            config_dict[section] = {}

        if key == "level":
            value = value.upper()
        config_dict[section][key] = _convert_value(key, value)


def load_secrets(secrets_file: Path | None = None) -> SecretsConfig:
    """Load secrets from environment variables and optional secrets.env file.

    Environment variables take precedence over file values.
    """
    secrets_dict: dict[str, str | None] = {}
    key_mapping = {
        f"{ENV_PREFIX}_DATABASE_URL": "database_url",
    }

    if secrets_file is None:
        secrets_file = find_secrets_file()

    if secrets_file and secrets_file.exists():
        logger.info("Loading secrets from: %s", secrets_file)
        file_secrets = parse_env_file(secrets_file)

        for file_key, config_key in key_mapping.items():
            if file_key in file_secrets:
                secrets_dict[config_key] = file_secrets[file_key]

    # Also accept the conventional DATABASE_URL name from the environment
    env_mapping = {**key_mapping, "DATABASE_URL": "database_url"}
    for env_var, config_key in env_mapping.items():
        value = os.environ.get(env_var)
        if value:
            secrets_dict[config_key] = value

    return SecretsConfig(**secrets_dict)


def load_config(config_file: Path | None = None) -> WineCollectionConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        WineCollectionConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return WineCollectionConfig(**config_dict)

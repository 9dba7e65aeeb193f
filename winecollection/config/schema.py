"""Pydantic models for Wine Collection configuration.

These models define the structure of config.toml and secrets.env files.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    # CORS configuration - empty list means same-origin only
    cors_origins: list[str] = []


class DatabaseConfig(BaseModel):
    """Relational database configuration."""

    url: str = "sqlite+aiosqlite:///./data/winecollection.db"
    echo: bool = False
    # Create missing tables on startup
    create_tables: bool = True


class StorageConfig(BaseModel):
    """File storage configuration."""

    data_dir: Path = Field(default_factory=lambda: Path("data"))
    log_dir: Path = Field(default_factory=lambda: Path("data/logs"))

    @property
    def pid_file(self) -> Path:
        """Get the server PID file path."""
        return self.data_dir / "winecollection.pid"

    @property
    def log_file(self) -> Path:
        """Get the background server log file path."""
        return self.log_dir / "winecollection.log"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class WineCollectionConfig(BaseModel):
    """Main Wine Collection configuration loaded from config.toml."""

    app_name: str = "Wine Collection"
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class SecretsConfig(BaseModel):
    """Secrets loaded from secrets.env file.

    These are sensitive values that should not be stored in config.toml.
    """

    # Full connection string; may carry credentials
    database_url: str | None = None

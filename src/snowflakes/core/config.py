"""Configuration management for the Snowflake service.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the SNOWFLAKES_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (SNOWFLAKES_* prefix)
2. .env file in the project root
3. Default values defined in SnowflakeConfig

Example .env file:
    SNOWFLAKES_DB_PATH=data/snowflakes.db
    SNOWFLAKES_SERVER_PORT=3000
    SNOWFLAKES_RANDOM_SIZE_MAX=12

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from snowflakes.core.config import config

    print(config.db_path)
    print(config.server_port)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SnowflakeConfig(BaseSettings):
    """Main configuration for the Snowflake service.

    Attributes
    ----------
    Storage:
        db_path : Path
            SQLite database file holding the ``snowflakes`` table

    Generation Limits:
        max_size : int
            Largest grid size accepted from API clients
        random_size_min : int
            Lower bound for the size picked when a client omits it
        random_size_max : int
            Upper bound for the size picked when a client omits it

    Server:
        server_host : str
            Server bind address (0.0.0.0 for local network)
        server_port : int
            Server port (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level used by the CLI entry point

    Notes
    -----
    - The parent directory of ``db_path`` is created automatically
    - To modify config, set environment variables and restart the application

    Examples
    --------
        >>> custom_config = SnowflakeConfig(
        ...     db_path="/tmp/flakes.db",
        ...     server_port=8080,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SNOWFLAKES_",
        case_sensitive=False,
    )

    # Storage
    db_path: Path = Field(
        default=Path("data") / "snowflakes.db",
        description="SQLite database file",
    )

    # Generation limits
    max_size: int = Field(
        default=20,
        description="Largest grid size accepted by the API",
        ge=1,
    )
    random_size_min: int = Field(
        default=3,
        description="Smallest size picked when the client omits one",
        ge=1,
    )
    random_size_max: int = Field(
        default=12,
        description="Largest size picked when the client omits one",
        ge=1,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=3000,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the server process",
    )

    @model_validator(mode="after")
    def _check_random_size_range(self) -> "SnowflakeConfig":
        if self.random_size_min > self.random_size_max:
            raise ValueError("random_size_min must not exceed random_size_max")
        return self

    def __init__(self, **kwargs):
        """Initialize configuration and create the database directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.db_path.parent.mkdir(parents=True, exist_ok=True)


# Global configuration instance
# Loads values from environment variables (SNOWFLAKES_* prefix) and .env file.
config = SnowflakeConfig()

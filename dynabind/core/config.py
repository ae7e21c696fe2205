"""
Configuration Settings.

This module defines the library configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="DYNABIND_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="DYNABIND_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="DYNABIND_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG-level logs to <log_file_dir>/dynabind.log",
        alias="DYNABIND_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # REST Invocation Configuration
    # =====================================================================
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout (seconds) applied to every REST service call",
        alias="DYNABIND_HTTP_TIMEOUT",
    )
    user_agent: str = Field(
        default="dynabind/0.1.0",
        min_length=1,
        description="User-Agent header sent with REST service calls",
        alias="DYNABIND_USER_AGENT",
    )
    rest_apis_path: Optional[Path] = Field(
        default=None,
        description="Optional JSON file with the REST API definitions to load at startup",
        alias="DYNABIND_REST_APIS_PATH",
    )

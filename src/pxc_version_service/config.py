"""Configuration for the PXC version service client."""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pxc_version_service import __version__
from pxc_version_service.domains.versions.client import DEFAULT_TIMEOUT


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class VersionServiceConfig(BaseSettings):
    """Configuration for talking to the version service.

    Loaded from environment variables with PXC_VS_ prefix
    or from a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PXC_VS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(
        default="https://check.percona.com",
        description="Base URL of the version service",
    )
    operator_version: str = Field(
        default=__version__,
        description="Operator version used to select the compatibility table",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )

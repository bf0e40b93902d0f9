"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Settings come from environment variables, an optional .env file and
default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bluerange_sample.shared import EnumEnvironment, EnumLogLevel
from bluerange_sample.shared.env import load_secret_file_variables


class BlueRangeSettings(BaseSettings):
    """BlueRange server and credential settings."""

    base_url: str = Field(
        default="https://bluerange.io", description="BlueRange server URL"
    )
    timeout: float = Field(
        default=30.0, gt=0, description="HTTP transport timeout in seconds"
    )
    user_access_token: Optional[str] = Field(
        default=None, description="User access token sent with every request"
    )
    tenant_organization_uuid: Optional[str] = Field(
        default=None, description="Tenant organization scoping every request"
    )

    model_config = SettingsConfigDict(
        env_prefix="BLUERANGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console only)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    bluerange: BlueRangeSettings = Field(default_factory=BlueRangeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Resolves ``*_FILE`` secrets first, so that e.g.
    BLUERANGE_USER_ACCESS_TOKEN_FILE can provide the access token.
    """
    load_secret_file_variables()
    return AppSettings()

"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "sips-gateway"
    app_version: str = "0.1.0"

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


class SipsSettings(BaseSettings):
    """
    Merchant settings for the SIPS binaries.

    Environment variables use the SIPS_ prefix:
        SIPS_MERCHANT_ID=014213245611111
        SIPS_PATHFILE=/opt/sips/param/pathfile
        SIPS_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix="SIPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    merchant_id: str = Field(
        default="014213245611111",
        description="Merchant ID assigned by SIPS",
    )
    merchant_country: str = Field(
        default="fr",
        description="Merchant country code (ISO 3166)",
    )
    pathfile: str = Field(
        default="/opt/sips/param/pathfile",
        description="Path of the SIPS configuration file",
    )
    request_path: str = Field(
        default="/opt/sips/bin/request",
        description="Path of the SIPS request binary",
    )
    response_path: str = Field(
        default="/opt/sips/bin/response",
        description="Path of the SIPS response binary",
    )
    debug: bool = Field(
        default=False,
        description="Use the SIPS demo environment",
    )
    command_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds to wait for a binary before killing it (unset waits forever)",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_sips_settings() -> SipsSettings:
    """Get cached SIPS settings instance."""
    return SipsSettings()


settings = get_settings()

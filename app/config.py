"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    supabase_url: str = Field(
        description="Base address of the storage and identity services",
        min_length=1,
    )
    supabase_service_role_key: str = Field(
        description="Privileged service credential used for storage and identity lookups",
        min_length=1,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key; when missing notifications are only recorded in the log",
    )
    sendgrid_sender: str = Field(
        default="noreply@traffinity.com",
        description="Email address that will appear as the sender of booking notifications",
        min_length=3,
    )
    sendgrid_sender_name: str = Field(
        default="Traffinity ParkHub",
        description="Display name attached to the sender address",
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to display booking dates and times",
    )
    brand_name: str = Field(default="Traffinity ParkHub")
    company_name: str = Field(default="Traffinity")
    http_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to storage and identity requests",
        gt=0,
    )
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def _validate_sender(self) -> "Settings":
        if "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @property
    def transport_enabled(self) -> bool:
        """Return ``True`` when an email transport credential is configured."""

        return bool(self.sendgrid_api_key and self.sendgrid_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]

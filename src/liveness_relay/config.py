"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Frozen: built once at startup and handed to each component constructor.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    target_channel_id: str = Field(
        default="",
        validation_alias=AliasChoices("target_channel_id", "betby_channel"),
    )

    # Sumsub
    sumsub_app_token: str = ""
    sumsub_secret_key: str = ""
    sumsub_base_url: str = "https://api.sumsub.com"
    sumsub_level_name: str = "liveness-only"
    sumsub_link_ttl_seconds: int = 600

    # Intercom
    intercom_token: str = ""
    intercom_admin_id: str = ""
    intercom_base_url: str = "https://api.intercom.io"

    # Outbound HTTP
    http_timeout_seconds: float = 10.0

    # Confirmation handling
    dedupe_confirmations: bool = True

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()

"""
Configuration and settings for the wedding backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_prefix: str = Field(default="/api")
    log_level: str = Field(default="INFO", validation_alias="WEDDING_LOG_LEVEL")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], validation_alias="WEDDING_CORS_ORIGINS"
    )

    # Database (Postgres expected)
    database_url: Optional[str] = Field(default=None, validation_alias="DATABASE_URL")

    # S3-compatible object storage
    storage_endpoint: Optional[str] = Field(
        default=None, validation_alias="STORAGE_ENDPOINT"
    )
    storage_region: Optional[str] = Field(default=None, validation_alias="STORAGE_REGION")
    storage_public_base_url: Optional[str] = Field(
        default=None, validation_alias="STORAGE_PUBLIC_BASE_URL"
    )
    aws_access_key_id: Optional[str] = Field(
        default=None, validation_alias="AWS_ACCESS_KEY_ID"
    )
    aws_secret_access_key: Optional[str] = Field(
        default=None, validation_alias="AWS_SECRET_ACCESS_KEY"
    )

    # Realtime + share inbox (Redis)
    redis_url: Optional[str] = Field(default=None, validation_alias="REDIS_URL")
    realtime_channel_prefix: str = Field(
        default="wedding:changes", validation_alias="WEDDING_REALTIME_PREFIX"
    )
    realtime_poll_threads: int = Field(
        default=200, validation_alias="WEDDING_REALTIME_POLL_THREADS"
    )
    share_inbox_prefix: str = Field(
        default="wedding:share-inbox", validation_alias="WEDDING_SHARE_INBOX_PREFIX"
    )
    share_inbox_ttl_seconds: int = Field(
        default=3600, validation_alias="WEDDING_SHARE_INBOX_TTL"
    )
    share_redirect_path: str = Field(
        default="/fotos-invitados", validation_alias="WEDDING_SHARE_REDIRECT_PATH"
    )

    # Guest gate
    access_code: str = Field(default="casapupis", validation_alias="WEDDING_ACCESS_CODE")
    admin_names: list[str] = Field(
        default=["Julian", "Jacqueline"], validation_alias="WEDDING_ADMIN_NAMES"
    )
    admin_pin: Optional[str] = Field(default=None, validation_alias="WEDDING_ADMIN_PIN")

    # Event details
    wedding_date: str = Field(
        default="2026-02-21T16:00:00-03:00", validation_alias="WEDDING_DATE"
    )
    maps_embed_url: Optional[str] = Field(
        default=None, validation_alias="WEDDING_MAPS_EMBED_URL"
    )

    # Photo uploads
    upload_concurrency: int = Field(default=5, validation_alias="WEDDING_UPLOAD_CONCURRENCY")
    photo_limit_per_guest: int = Field(
        default=50, validation_alias="WEDDING_PHOTO_LIMIT"
    )
    photos_page_size: int = Field(default=20, validation_alias="WEDDING_PHOTOS_PAGE_SIZE")

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, validation_alias="WEDDING_USE_IN_MEMORY_BACKENDS"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

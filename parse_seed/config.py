"""
Configuration settings for parse-seed.

Uses Pydantic Settings to load the Parse credentials, upstream endpoints,
HTTP behaviour and logging options from the environment (or a local `.env`).
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Parse
    parse_application_id: str = Field("", alias="PARSE_APPLICATION_ID")
    parse_client_key: str = Field("", alias="PARSE_CLIENT_KEY")
    parse_server_url: str = Field("http://localhost:1337/parse", alias="PARSE_SERVER_URL")
    parse_batch_size: int = Field(50, ge=1, le=50, alias="SEED_PARSE_BATCH_SIZE")
    parse_batch_transaction: bool = Field(False, alias="SEED_PARSE_BATCH_TRANSACTION")

    # Upstream
    randomuser_url: str = Field("https://randomuser.me/api/", alias="RANDOMUSER_URL")
    fetch_max_attempts: int = Field(1, ge=1, le=10, alias="SEED_FETCH_MAX_ATTEMPTS")
    http_timeout_seconds: float = Field(30.0, gt=0, alias="SEED_HTTP_TIMEOUT_SECONDS")

    # Seeding defaults
    default_count: int = Field(100, ge=0, le=5000, alias="SEED_DEFAULT_COUNT")
    default_class_name: str = Field("Contact", min_length=1, alias="SEED_DEFAULT_CLASS_NAME")

    # Application
    log_level: str = Field("INFO", alias="SEED_LOG_LEVEL")
    log_json: bool = Field(False, alias="SEED_LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]

"""
Application settings.

Loaded from environment variables (or a .env file) with pydantic-settings.
Every value has a default so the service starts with no configuration.
"""

from functools import lru_cache
from typing import List

from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Validated settings for the catalog service.

    Attributes:
        PORT / HOST:     where uvicorn listens (default 0.0.0.0:3000).
        API_KEY:         shared secret required on mutating routes.
        API_KEY_HEADER:  request header that carries the secret.
        LOG_LEVEL:       root log level.
        LOG_FORMAT:      "text" or "json".
        CORS_ORIGINS:    origins allowed by the CORS middleware.
        SEED_DATA:       load the sample products into a new store.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    port: int = 3000
    host: str = "0.0.0.0"

    api_key: str = "dev-api-key"
    api_key_header: str = "X-API-Key"

    log_level: str = "INFO"
    log_format: str = "text"

    cors_origins: List[str] = ["*"]

    seed_data: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    # settings the running app was built with (tests build apps with their own)
    return request.app.state.settings

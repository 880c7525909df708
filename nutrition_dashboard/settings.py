from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (``API_KEY``); matching is
    # case-insensitive so they load without a ``.env`` file.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    dashboard_service_url: str
    dashboard_service_token: str
    dashboard_service_timeout: float = 30.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.kidsout.ru/api/v2"


class Settings(BaseSettings):
    """Client settings loaded from environment variables with KIDSOUT_ prefix."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    # Seconds, applied to both connect and read
    timeout: float = 10.0

    model_config = SettingsConfigDict(env_prefix="KIDSOUT_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()

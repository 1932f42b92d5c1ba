"""
Server settings loaded from environment variables.
Uses pydantic-settings; every variable is prefixed with ``CHAT_``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHAT_")

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    # Comma-separated list of allowed origins, or "*"
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()

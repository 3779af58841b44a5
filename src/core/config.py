"""Application settings, read from environment variables prefixed with BOWLING_"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOWLING_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@lru_cache
def get_settings() -> Settings:
    return Settings()

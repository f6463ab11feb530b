# app/config.py
"""
Process configuration, read from the environment (and an optional .env file).

    PORT=8080 python -m app
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "User Accounts API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DATABASE_URL: str = "sqlite:///database.sqlite"  # file in project root
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

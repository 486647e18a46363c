"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_TITLE: str = "Creature Social Simulation"
    LOG_LEVEL: str = "INFO"

    # None이면 비결정적 (시스템 엔트로피)
    RANDOM_SEED: Optional[int] = None


settings = Settings()

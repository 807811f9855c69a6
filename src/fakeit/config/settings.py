"""Framework settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Framework settings loaded from ``FAKEIT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FAKEIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Minimum level of emitted log lines")
    log_json: bool = Field(default=False, description="Render log lines as JSON")

    # Fakes
    record_calls: bool = Field(default=True, description="Keep every intercepted call of a fake")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

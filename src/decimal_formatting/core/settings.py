"""Library settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_FRACTION_DIGITS = 1000


class Settings(BaseSettings):
    """Runtime limits for the formatting helpers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_fraction_digits: int = Field(
        default=DEFAULT_MAX_FRACTION_DIGITS,
        alias="DECIMAL_FORMATTING_MAX_FRACTION_DIGITS",
        ge=0,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()

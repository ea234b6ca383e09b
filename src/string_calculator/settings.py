"""Environment-driven settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CalculatorSettings(BaseSettings):
    """Settings read from ``STRING_CALCULATOR_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="STRING_CALCULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    upper_bound: int = Field(default=1000, ge=0)
    log_level: LogLevel = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> CalculatorSettings:
    """Return cached settings instance."""
    return CalculatorSettings()

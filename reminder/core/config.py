"""
Application configuration using Pydantic Settings.

Every setting can be overridden with a ``REMINDER_``-prefixed environment
variable or a ``.env`` file in the working directory.
"""

from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="REMINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Storage
    data_file: str = "~/.local/share/reminder/reminders.json"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_to_file: bool = False
    log_dir: str = "~/.local/share/reminder/logs"

    # Display: truncate reminder text to this many characters
    trim: Optional[int] = Field(default=None, gt=0)

    # Pin "today" (ISO date) for reproducible runs
    today: Optional[date] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def log_level_upper(cls, v):
        return v.upper() if isinstance(v, str) else v


def describe_settings_error(error: ValidationError) -> str:
    """Summarize a settings validation error on a single line."""
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        problems.append(f"REMINDER_{field.upper()}: {err['msg']}")
    return "; ".join(problems)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_data_file_path(settings: Optional[Settings] = None) -> Path:
    """Return the reminder file path with ~ expanded."""
    settings = settings or get_settings()
    return Path(settings.data_file).expanduser()


def get_today(settings: Optional[Settings] = None) -> date:
    """Return the date commands should treat as today."""
    settings = settings or get_settings()
    return settings.today or date.today()

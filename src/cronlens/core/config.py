# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cronlens.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRONLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Scheduling defaults
    default_timezone: str = "local"
    default_count: int = 5
    max_count: int = 100
    range_limit: int = 100

    @field_validator("default_count", "max_count", "range_limit")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("default_timezone", mode="before")
    @classmethod
    def _strip_timezone(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip() or "local"
        return v

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {errors}") from exc

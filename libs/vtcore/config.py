"""Configuration loading for the vibes-theory engine.

Reads environment variables into a typed settings object using Pydantic v2.
None of the theory code reads these settings; they only drive logging and
tracing for whatever process embeds the engine.

Env variables:
- VT_LOG_LEVEL (default: INFO)
- VT_LOG_FORMAT (default: json; "text" for plain lines)
- VT_OTEL_ENDPOINT (optional)
- VT_ENV (default: development)
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    VT_LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    VT_LOG_FORMAT: str = Field(default="json", description="json or text")
    VT_OTEL_ENDPOINT: Optional[str] = Field(
        default=None, description="OTLP HTTP endpoint (e.g., http://localhost:4318)"
    )
    VT_ENV: str = Field(default="development", description="Environment name")

    @field_validator("VT_LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("VT_LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in ("json", "text"):
            raise ValueError(f"VT_LOG_FORMAT must be 'json' or 'text', got {value!r}")
        return fmt

    @field_validator("VT_OTEL_ENDPOINT")
    @classmethod
    def blank_endpoint_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment and memoize.

    Raises:
        ValueError: if a variable holds an unsupported value.
    """

    env = {
        "VT_LOG_LEVEL": os.getenv("VT_LOG_LEVEL", "INFO"),
        "VT_LOG_FORMAT": os.getenv("VT_LOG_FORMAT", "json"),
        "VT_OTEL_ENDPOINT": os.getenv("VT_OTEL_ENDPOINT"),
        "VT_ENV": os.getenv("VT_ENV", "development"),
    }

    return Settings.model_validate(env)


__all__ = ["Settings", "get_settings"]

# src/ensure/config.py
"""Runtime settings for ensure.

The checks themselves are not configurable; their behaviour is fixed.
These settings only control how the package's diagnostics are logged.
Settings are frozen (immutable) after construction.

ENSURE_LOG_LEVEL and ENSURE_LOG_JSON are read only by
EnsureSettings.from_env(), and only when the host application calls it.
The checks never read the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ensure.logging import configure_logging

LOG_LEVEL_ENV = "ENSURE_LOG_LEVEL"
LOG_JSON_ENV = "ENSURE_LOG_JSON"

_TRUTHY = frozenset({"1", "true", "yes", "on"})

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnsureSettings(BaseModel):
    """Logging configuration for contract-violation diagnostics."""

    model_config = {"frozen": True}

    log_level: LogLevel = Field(default="INFO", description="Root log level")
    json_logs: bool = Field(default=False, description="Emit JSON instead of console output")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EnsureSettings:
        """Build settings from ENSURE_* environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            pydantic.ValidationError: If ENSURE_LOG_LEVEL is not a known level
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if LOG_LEVEL_ENV in env:
            values["log_level"] = env[LOG_LEVEL_ENV]
        if LOG_JSON_ENV in env:
            values["json_logs"] = env[LOG_JSON_ENV].strip().lower() in _TRUTHY
        return cls.model_validate(values)


def configure_from_settings(settings: EnsureSettings) -> None:
    """Apply settings to structlog and stdlib logging."""
    configure_logging(json_output=settings.json_logs, level=settings.log_level)

"""Environment-driven settings for record-spine.

Every knob of record processing (readiness flag, attempt count, delay
between attempts) and of logging is read from ``RECORD_SPINE_*``
environment variables or a ``.env`` file, validated by pydantic at startup.

Examples:
    >>> from record_spine.core.settings import RecordSpineSettings
    >>> s = RecordSpineSettings(attempt_delay=0)
    >>> s.max_attempts
    3

    From the environment::

        RECORD_SPINE_READY=false
        RECORD_SPINE_ATTEMPT_DELAY=0.5
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from record_spine.core.errors import ConfigError


class RecordSpineSettings(BaseSettings):
    """Settings for record processing and logging.

    Fields
    ──────
    ready          : Readiness flag gating ``Record.process``
    max_attempts   : Attempts made by each ``process`` call
    attempt_delay  : Seconds blocked after every attempt
    log_level      : Structlog log level
    json_logs      : Force JSON (True) or console (False) logs; None = auto
    service        : Service name attached to every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORD_SPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Processing ───────────────────────────────────────────────
    ready: bool = True
    max_attempts: int = Field(default=3, ge=0)
    attempt_delay: float = Field(default=30.0, ge=0.0)

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None
    service: str = "record-spine"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RecordSpineSettings:
    """Load settings once per process.

    Raises:
        ConfigError: if the environment holds invalid values
    """
    try:
        return RecordSpineSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid record-spine settings: {e}", cause=e) from e


def reset_settings() -> None:
    """Drop the cached settings (tests and reconfiguration)."""
    get_settings.cache_clear()


__all__ = ["RecordSpineSettings", "get_settings", "reset_settings"]

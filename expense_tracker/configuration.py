"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables prefixed with
    ``EXPENSE_TRACKER_``. The configuration is cached so validation runs once
    per process; tests clear the cache with ``get_settings.cache_clear()``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_KNOWN_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the command line entry point.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts when transactions are printed.",
        min_length=1,
        max_length=3,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        """Accept level names in any casing and reject unknown ones."""

        normalised = str(value).strip().upper()
        if normalised not in _KNOWN_LEVELS:
            raise ValueError(f"Unsupported log level: {value}")
        return normalised

    @property
    def numeric_log_level(self) -> int:
        """Return the configured level as understood by :mod:`logging`."""

        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()

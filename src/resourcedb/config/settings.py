"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for stores.

Usage:
    from resourcedb.config import DatabaseSettings

    # Load from environment variables (RESOURCEDB_*)
    settings = DatabaseSettings()

    # Or override with explicit values
    settings = DatabaseSettings(max_statements=10_000, dump_level="DEBUG")
"""

from __future__ import annotations

import logging

from pydantic import field_validator

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install resourcedb"
    ) from e


class DatabaseSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for statement stores.

    Attributes:
        max_statements: Maximum number of statements a store accepts
            (None for unbounded). Bounding the store bounds select latency.
        dump_level: Logging level name used by dump() when no sink is given.
        log_rejected: Whether rejected (invalid) statements are logged at DEBUG.

    Environment Variables:
        RESOURCEDB_MAX_STATEMENTS
        RESOURCEDB_DUMP_LEVEL
        RESOURCEDB_LOG_REJECTED
    """

    model_config = SettingsConfigDict(
        env_prefix="RESOURCEDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_statements: int | None = None
    dump_level: str = "INFO"
    log_rejected: bool = True

    @field_validator("max_statements")
    @classmethod
    def check_max_statements(cls, value: int | None) -> int | None:
        if value is not None and value < 0:
            raise ValueError("max_statements must be non-negative")
        return value

    @field_validator("dump_level")
    @classmethod
    def normalize_dump_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @property
    def dump_level_number(self) -> int:
        """Numeric logging level for dump_level."""
        return logging.getLevelNamesMapping()[self.dump_level]

"""Configuration module using Pydantic Settings.

Provides typed store configuration with environment variable support.

Usage:
    from resourcedb.config import DatabaseSettings

    settings = DatabaseSettings(max_statements=1000)
    store = LocalStatementStore(settings=settings)
"""

from resourcedb.config.settings import DatabaseSettings

__all__ = [
    "DatabaseSettings",
]

"""Tests for DatabaseSettings."""

import logging

import pytest
from pydantic import ValidationError

from resourcedb.config import DatabaseSettings


def test_defaults(monkeypatch):
    for name in ("RESOURCEDB_MAX_STATEMENTS", "RESOURCEDB_DUMP_LEVEL", "RESOURCEDB_LOG_REJECTED"):
        monkeypatch.delenv(name, raising=False)

    settings = DatabaseSettings(_env_file=None)

    assert settings.max_statements is None
    assert settings.dump_level == "INFO"
    assert settings.log_rejected is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RESOURCEDB_MAX_STATEMENTS", "100")
    monkeypatch.setenv("RESOURCEDB_DUMP_LEVEL", "warning")
    monkeypatch.setenv("RESOURCEDB_LOG_REJECTED", "false")

    settings = DatabaseSettings(_env_file=None)

    assert settings.max_statements == 100
    assert settings.dump_level == "WARNING"
    assert settings.dump_level_number == logging.WARNING
    assert settings.log_rejected is False


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("RESOURCEDB_MAX_STATEMENTS", "100")

    assert DatabaseSettings(_env_file=None, max_statements=5).max_statements == 5


def test_rejects_unknown_dump_level():
    with pytest.raises(ValidationError):
        DatabaseSettings(dump_level="LOUD")


def test_rejects_negative_capacity():
    with pytest.raises(ValidationError):
        DatabaseSettings(max_statements=-1)

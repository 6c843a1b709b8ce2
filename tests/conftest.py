"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from resourcedb import DatabaseSettings, ResourceDatabase, literal, resource


@pytest.fixture
def settings():
    """Settings isolated from RESOURCEDB_* environment variables."""
    return DatabaseSettings(max_statements=None, dump_level="INFO", log_rejected=True)


@pytest.fixture
def store(settings):
    """Fresh, empty store."""
    return ResourceDatabase(settings=settings)


@pytest.fixture
def db(store):
    """Store holding the designer/family regression data (15 statements).

    Ids:
        0, 2, 4   PiiResourceDatabase my:designer <Topi|Lasse|Olli>
        1, 3, 5   [0|2|4] my:evaluation "true"|"true"|"false"
        6 - 11    title and wife of Topi, Lasse, Olli
        12 - 14   my:kids "6", "3", "1"
    """
    # Claim, then reify the claim with an evaluation
    claim = store.add_statement(resource("PiiResourceDatabase", "my:designer", "Topi"))
    store.add_statement(literal(claim, "my:evaluation", "true"))
    claim = store.add_statement(resource("PiiResourceDatabase", "my:designer", "Lasse"))
    store.add_statement(literal(claim, "my:evaluation", "true"))
    claim = store.add_statement(resource("PiiResourceDatabase", "my:designer", "Olli"))
    store.add_statement(literal(claim, "my:evaluation", "false"))

    store.add_statement(literal("Topi", "my:title", "CTO"))
    store.add_statement(resource("Topi", "my:wife", "Anna"))
    store.add_statement(literal("Lasse", "my:title", "Software Engineer"))
    store.add_statement(resource("Lasse", "my:wife", "Tuulikki"))
    store.add_statement(literal("Olli", "my:title", "Keisari"))
    store.add_statement(resource("Olli", "my:wife", "Johanna"))

    store.add_statement(literal("Topi", "my:kids", str(6)))
    store.add_statement(literal("Lasse", "my:kids", str(3)))
    store.add_statement(literal("Olli", "my:kids", str(1)))
    return store

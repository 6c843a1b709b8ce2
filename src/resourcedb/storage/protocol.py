"""Storage protocol for swappable statement stores.

The storage layer owns statements and assigns their ids. Query evaluation
only needs a consistent, id-ordered snapshot, so any backend exposing
snapshot() can be queried with resourcedb.storage.select().

Usage:
    store = LocalStatementStore()
    store.add_statement(literal("Topi", "my:title", "CTO"))
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from resourcedb.core.statement import Statement


@runtime_checkable
class StatementStore(Protocol):
    """Abstract statement store interface. Implementations hold the data.

    Thread Safety:
        Single writer, many readers. add_statement() and clear() need
        exclusive access; snapshot() must return a consistent copy.
    """

    def add_statement(self, statement: Statement) -> int:
        """Store a statement. Returns its id, or -1 if it is invalid."""
        ...

    def statement_count(self) -> int:
        """Number of stored statements."""
        ...

    def statement(self, statement_id: int) -> Statement:
        """Statement with the given id. Raises StatementNotFoundError."""
        ...

    def statements(self) -> Iterator[Statement]:
        """Iterate statements in id order."""
        ...

    def snapshot(self) -> tuple[Statement, ...]:
        """Point-in-time copy of all statements in id order."""
        ...

    def clear(self) -> None:
        """Remove all statements. Invalidates all ids."""
        ...

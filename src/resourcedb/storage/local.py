"""Local in-memory statement store.

Simple list-based storage suitable for single-process use and testing.
Statements are kept in insertion order, which is also id order.

Usage:
    store = LocalStatementStore()
    claim = store.add_statement(store.resource("PiiResourceDatabase", "my:designer", "Topi"))
    store.add_statement(store.literal(claim, "my:evaluation", "true"))

    designers = store.select(object, predicate.eq("my:designer"))
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any, overload

from resourcedb.config import DatabaseSettings
from resourcedb.core.query import Expression, Projection, WholeStatement, execute
from resourcedb.core.statement import Statement, literal, resource
from resourcedb.storage.allocator import StatementIdAllocator

logger = logging.getLogger(__name__)


class StatementNotFoundError(LookupError):
    """Raised when looking up an id that no stored statement has."""

    pass


class StoreCapacityError(RuntimeError):
    """Raised when adding a statement to a store that is full."""

    pass


class LocalStatementStore:
    """Append-only, insertion-ordered statement store.

    Structure:
        _statements[id] = statement  (ids are dense and equal positions)

    O(n) scan per select - there are no indexes.

    Thread Safety:
        Writers (add_statement, add_statements, clear) serialize on an
        internal lock. Readers copy the statement list under the same lock
        and evaluate outside it, so any number of selects may run alongside
        each other and see a consistent point-in-time snapshot.

    Args:
        settings: Store configuration (default: DatabaseSettings() from env).
    """

    def __init__(self, settings: DatabaseSettings | None = None):
        """Initialize an empty store.

        Args:
            settings: Store configuration (default: DatabaseSettings() from env).
        """
        self._settings = settings if settings is not None else DatabaseSettings()
        self._allocator = StatementIdAllocator()
        self._statements: list[Statement] = []
        self._lock = threading.Lock()

    @property
    def settings(self) -> DatabaseSettings:
        return self._settings

    # Factories, mirroring resourcedb.core.statement for store-centric code
    resource = staticmethod(resource)
    literal = staticmethod(literal)

    def add_statement(self, statement: Statement) -> int:
        """Store a statement and assign it the next id.

        Any id the caller put on the statement is overwritten. Duplicate
        triples are stored again under a new id.

        Args:
            statement: Statement to store.

        Returns:
            Assigned id, or -1 if the statement is invalid (nothing stored,
            no id consumed).

        Raises:
            StoreCapacityError: If the store already holds max_statements.
        """
        if not statement.is_valid():
            if self._settings.log_rejected:
                logger.debug("Rejected invalid statement: %r", statement)
            return -1

        with self._lock:
            limit = self._settings.max_statements
            if limit is not None and len(self._statements) >= limit:
                raise StoreCapacityError(f"Statement store is full ({limit} statements)")
            statement_id = self._allocator.allocate()
            self._statements.append(statement.with_id(statement_id))
        return statement_id

    def add_statements(self, batch: Iterable[Statement]) -> list[int]:
        """Store statements one by one, in order.

        Args:
            batch: Statements to store.

        Returns:
            Assigned id (or -1) for each statement, in input order.
        """
        return [self.add_statement(s) for s in batch]

    def statement_count(self) -> int:
        """Number of stored statements."""
        return len(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def statement(self, statement_id: int) -> Statement:
        """Get a stored statement by id.

        Args:
            statement_id: Id returned by add_statement().

        Returns:
            The stored statement.

        Raises:
            StatementNotFoundError: If no statement has this id.
        """
        found = self.get(statement_id)
        if found is None:
            raise StatementNotFoundError(f"No statement with id {statement_id}")
        return found

    def get(self, statement_id: int) -> Statement | None:
        """Get a stored statement by id, or None if no statement has it."""
        with self._lock:
            if not self._allocator.is_allocated(statement_id):
                return None
            return self._statements[statement_id]

    def snapshot(self) -> tuple[Statement, ...]:
        """Point-in-time copy of all statements in id order."""
        with self._lock:
            return tuple(self._statements)

    def statements(self) -> Iterator[Statement]:
        """Iterate over a snapshot of the stored statements in id order.

        Yields:
            Each statement, in ascending id order.
        """
        yield from self.snapshot()

    def __iter__(self) -> Iterator[Statement]:
        return self.statements()

    def clear(self) -> None:
        """Remove all statements and restart ids at 0.

        Every id handed out before the call becomes invalid.
        """
        with self._lock:
            self._statements.clear()
            self._allocator.reset()

    @overload
    def select(self, expression: Expression, /, *, distinct: bool = False) -> list[Statement]: ...

    @overload
    def select(
        self, projection: Projection, expression: Expression, /, *, distinct: bool = False
    ) -> list[Any]: ...

    def select(self, *args: Any, distinct: bool = False) -> list[Any]:
        """Select statements matching an expression.

        Supports two forms:
            store.select(expression)              # matching Statements
            store.select(projection, expression)  # projected values

        Subselects in expression run once per call against the same
        snapshot as the outer scan. With distinct, repeated projected values
        are dropped after their first occurrence.

        Returns:
            Matches (or their projections) in insertion order. Empty if
            nothing matches.

        Raises:
            TypeError: If called with other than one or two arguments.
            ConversionError: If a conversion fails for some statement.
            ProjectionError: If the projection has no value for a match.
        """
        if len(args) == 1:
            projection, expression = WholeStatement(), args[0]
        elif len(args) == 2:
            projection, expression = args
        else:
            raise TypeError(f"select() takes 1 or 2 arguments ({len(args)} given)")
        return execute(self.snapshot(), projection, expression, distinct=distinct)

    def dump(self, sink: Callable[[str], None] | None = None) -> list[str]:
        """Write one line per statement, in id order.

        Lines look like ``3: Topi my:wife <Anna>`` for resource objects and
        ``4: Topi my:title "CTO"`` for literals.

        Args:
            sink: Callable receiving each line (default: this module's
                logger at the configured dump level).

        Returns:
            The written lines.
        """
        lines = [f"{s.id}: {s}" for s in self.snapshot()]
        level = self._settings.dump_level_number
        for line in lines:
            if sink is not None:
                sink(line)
            else:
                logger.log(level, line)
        return lines

"""Store-level query operations."""

from __future__ import annotations

from typing import Any

from resourcedb.core.query import Expression, Projection, execute
from resourcedb.storage.protocol import StatementStore


def select(
    projection: Projection,
    expression: Expression,
    store: StatementStore,
    *,
    distinct: bool = False,
) -> list[Any]:
    """Run a projected select against any statement store.

    Equivalent to ``store.select(projection, expression)`` for stores that
    only implement the StatementStore protocol.

    Args:
        projection: Term to extract from each match, or ``statements``.
        expression: Filter expression.
        store: Store to query.
        distinct: Keep only the first occurrence of each projected value.

    Returns:
        Projected values of matching statements, in insertion order.
    """
    return execute(store.snapshot(), projection, expression, distinct=distinct)

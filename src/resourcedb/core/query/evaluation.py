"""Expression evaluation and projection over an ordered run of statements.

execute() is stateless: it takes a point-in-time sequence of statements
(already in id order) and never mutates it. Stores call it with a
snapshot of their contents.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any

from resourcedb.core.query.models import (
    And,
    CompareOp,
    Comparison,
    Everything,
    Expression,
    MemberOf,
    Not,
    Or,
    Projection,
    ProjectionError,
    QueryError,
    Subselect,
    Term,
    WholeStatement,
)
from resourcedb.core.statement import Statement

_OPERATORS: dict[CompareOp, Callable[[Any, Any], bool]] = {
    CompareOp.EQ: operator.eq,
    CompareOp.NE: operator.ne,
    CompareOp.LT: operator.lt,
    CompareOp.LE: operator.le,
    CompareOp.GT: operator.gt,
    CompareOp.GE: operator.ge,
}

# Materialized subselect values, keyed by id() of the Subselect node
Resolved = dict[int, frozenset[Any]]


def execute(
    statements: Sequence[Statement],
    projection: Projection,
    expression: Expression,
    *,
    distinct: bool = False,
) -> list[Any]:
    """Select and project every statement matching expression.

    Subselects anywhere in expression are materialized once, against the
    same statements, before the scan. Matches are projected in the order
    of statements.

    Args:
        statements: Statements to scan, in ascending id order.
        projection: Term to extract from each match, or WholeStatement.
        expression: Filter expression.
        distinct: Keep only the first occurrence of each projected value.

    Returns:
        Projected values of matching statements, in scan order.

    Raises:
        ConversionError: If a conversion fails for some statement.
        ProjectionError: If the projection has no value for a match.
        QueryError: If a comparison mixes incomparable values or a
            membership set would hold unhashable values.
    """
    resolved: Resolved = {}
    resolve_subselects(expression, statements, resolved)
    results = [
        project(projection, statement)
        for statement in statements
        if matches(expression, statement, resolved)
    ]
    if distinct:
        return list(dict.fromkeys(results))
    return results


def resolve_subselects(
    expression: Expression, statements: Sequence[Statement], resolved: Resolved
) -> None:
    """Materialize each Subselect in expression into resolved.

    A Subselect node that appears more than once is still run only once.
    """
    if isinstance(expression, MemberOf):
        source = expression.source
        if isinstance(source, Subselect) and id(source) not in resolved:
            values = execute(statements, source.projection, source.expression)
            try:
                resolved[id(source)] = frozenset(values)
            except TypeError as e:
                raise QueryError(f"Subselect {source.projection} yields unhashable values") from e
    elif isinstance(expression, (And, Or)):
        for operand in expression.operands:
            resolve_subselects(operand, statements, resolved)
    elif isinstance(expression, Not):
        resolve_subselects(expression.operand, statements, resolved)


def matches(expression: Expression, statement: Statement, resolved: Resolved) -> bool:
    """Check whether a statement satisfies expression.

    Raises:
        QueryError: If expression is not a query node, a subselect was not
            resolved beforehand, or a membership test sees an unhashable value.
    """
    if isinstance(expression, Comparison):
        return _compare(expression, statement)
    if isinstance(expression, MemberOf):
        value = expression.term.extract(statement)
        if value is None:
            return False
        try:
            found = value in _values(expression.source, resolved)
        except TypeError as e:
            raise QueryError(
                f"Cannot test unhashable {value!r} for membership (statement {statement.id})"
            ) from e
        return found != expression.negated
    if isinstance(expression, And):
        return all(matches(e, statement, resolved) for e in expression.operands)
    if isinstance(expression, Or):
        return any(matches(e, statement, resolved) for e in expression.operands)
    if isinstance(expression, Not):
        return not matches(expression.operand, statement, resolved)
    if isinstance(expression, Everything):
        return True
    raise QueryError(f"Invalid query expression: {expression!r}")


def project(projection: Projection, statement: Statement) -> Any:
    """Extract the projected value of a matched statement.

    Raises:
        ProjectionError: If the projection has no value for statement.
    """
    if isinstance(projection, WholeStatement):
        return statement
    value = projection.extract(statement)
    if value is None:
        raise ProjectionError(f"Projection {projection} has no value for statement {statement.id}")
    return value


def _values(source: Subselect | frozenset[Any], resolved: Resolved) -> frozenset[Any]:
    if not isinstance(source, Subselect):
        return source
    try:
        return resolved[id(source)]
    except KeyError:
        raise QueryError("Subselect evaluated before it was resolved") from None


def _compare(node: Comparison, statement: Statement) -> bool:
    left = node.term.extract(statement)
    if left is None:
        return False
    right = node.operand.extract(statement) if isinstance(node.operand, Term) else node.operand
    if right is None:
        return False
    try:
        return bool(_OPERATORS[node.op](left, right))
    except TypeError as e:
        raise QueryError(
            f"Cannot compare {left!r} {node.op.value} {right!r} (statement {statement.id})"
        ) from e

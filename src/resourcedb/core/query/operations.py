"""Query operations: term selectors, conversions, and logical combinators."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from resourcedb.core.query.models import (
    And,
    AttributeTerm,
    Comparison,
    ConvertedTerm,
    Everything,
    Expression,
    Field,
    FieldTerm,
    MemberOf,
    Not,
    Or,
    Projection,
    Subselect,
    Term,
    WholeStatement,
)
from resourcedb.core.statement import parse_reification

_INTEGER = re.compile(r"[+-]?\d+")
_EXPRESSIONS = (Comparison, MemberOf, And, Or, Not, Everything)

subject = FieldTerm(Field.SUBJECT)
predicate = FieldTerm(Field.PREDICATE)
object = FieldTerm(Field.OBJECT)
statement_id = FieldTerm(Field.STATEMENT_ID)
resource_type = FieldTerm(Field.RESOURCE_TYPE)

statements = WholeStatement()
"""Projection yielding the matched Statement itself."""

everything = Everything()
"""Expression matching every statement."""


def attribute(name: str) -> AttributeTerm:
    """Object of statements whose predicate is name.

    ``attribute("my:wife").eq("Anna")`` is equivalent to
    ``and_(predicate.eq("my:wife"), object.eq("Anna"))``.
    """
    return AttributeTerm(name)


def _parse_int(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value)
    raise ValueError(f"Not an integer: {value!r}")


def _reification_id(value: Any) -> int:
    if not isinstance(value, str):
        raise TypeError(f"Not resource text: {value!r}")
    return parse_reification(value)


def as_int(term: Term) -> ConvertedTerm:
    """Parse a term's text as an integer.

    Text that is not an integer raises ConversionError for that statement;
    the select fails rather than substituting a default.
    """
    return ConvertedTerm(term, _parse_int, "as_int")


def reification_id(term: Term) -> ConvertedTerm:
    """Interpret ``"[n]"`` text as the statement id n, or -1 otherwise."""
    return ConvertedTerm(term, _reification_id, "reification_id")


def converted(term: Term, convert: Callable[[Any], Any], name: str | None = None) -> ConvertedTerm:
    """Apply a caller-supplied conversion to a term.

    Args:
        term: Term whose value is converted.
        convert: Conversion function. ValueError or TypeError raised by it
            is reported as ConversionError.
        name: Name used in error messages (defaults to the function name).

    Returns:
        Term usable in comparisons and as a projection.
    """
    return ConvertedTerm(term, convert, name or getattr(convert, "__name__", "convert"))


def _check(operands: tuple[Any, ...]) -> tuple[Expression, ...]:
    for operand in operands:
        if not isinstance(operand, _EXPRESSIONS):
            raise TypeError(f"Expected a query expression, got {operand!r}")
    return operands


def and_(first: Expression, second: Expression, *more: Expression) -> And:
    """All expressions match the same statement.

    Operands are evaluated left to right and evaluation stops at the first
    non-match, so a conversion placed after a guard only sees guarded
    statements:

        and_(predicate.eq("my:kids"), as_int(object).gt(5))

    Nested And nodes are flattened.

    Raises:
        TypeError: If an operand is not an expression.
    """
    operands: list[Expression] = []
    for operand in _check((first, second, *more)):
        operands.extend(operand.operands if isinstance(operand, And) else (operand,))
    return And(tuple(operands))


def or_(first: Expression, second: Expression, *more: Expression) -> Or:
    """Any expression matches. Nested Or nodes are flattened.

    Raises:
        TypeError: If an operand is not an expression.
    """
    operands: list[Expression] = []
    for operand in _check((first, second, *more)):
        operands.extend(operand.operands if isinstance(operand, Or) else (operand,))
    return Or(tuple(operands))


def not_(operand: Expression) -> Not:
    """Expression does not match.

    Raises:
        TypeError: If operand is not an expression.
    """
    _check((operand,))
    return Not(operand)


def subselect(projection: Projection, expression: Expression) -> Subselect:
    """Describe a nested select for use as a membership operand.

    The nested select runs once per outer select call against the same
    snapshot of the store; its values form the membership set:

        and_(predicate.eq("my:wife"), subject.eq(subselect(subject, ...)))

    Raises:
        TypeError: If projection or expression has the wrong type.
    """
    if not isinstance(projection, (Term, WholeStatement)):
        raise TypeError(f"Expected a projection, got {projection!r}")
    _check((expression,))
    return Subselect(projection=projection, expression=expression)

"""Query models: terms, expression nodes, and subqueries.

Usage:
    # Atomic comparisons via builder methods on terms
    predicate.eq("my:designer")
    as_int(object).gt(5)

    # Attribute shortcut: predicate and object of the same statement
    attribute("my:wife").eq("Anna")

    # Membership in a nested select, materialized once per outer select
    subject.eq(subselect(subject, predicate.eq("my:kids")))

Expressions are pure descriptions. They hold no store reference and are
only evaluated by resourcedb.core.query.evaluation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from resourcedb.core.statement import Statement


class QueryError(ValueError):
    """Raised when an expression cannot be built or evaluated."""

    pass


class ConversionError(QueryError):
    """Raised when a term conversion cannot parse a statement's value.

    Attributes:
        statement_id: Id of the statement being evaluated.
        value: The value that failed to convert.
        conversion: Name of the conversion.
    """

    def __init__(self, statement_id: int, value: Any, conversion: str):
        super().__init__(
            f"Cannot apply {conversion} to {value!r} (statement {statement_id})"
        )
        self.statement_id = statement_id
        self.value = value
        self.conversion = conversion


class ProjectionError(QueryError):
    """Raised when a projection yields no value for a matched statement."""

    pass


class Field(Enum):
    """Statement field read by a FieldTerm."""

    SUBJECT = auto()
    PREDICATE = auto()
    OBJECT = auto()
    STATEMENT_ID = auto()
    RESOURCE_TYPE = auto()


class CompareOp(Enum):
    """Comparison operator of an atomic expression."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


class Term(ABC):
    """Value extractor evaluated against a single statement.

    Subclasses implement extract(); None means the term has no value for
    that statement, and every comparison against it is false.
    """

    @abstractmethod
    def extract(self, statement: Statement) -> Any: ...

    def eq(self, other: Any) -> Expression:
        """Equality, or membership when other is a collection or subselect."""
        return _compare(self, CompareOp.EQ, other)

    def ne(self, other: Any) -> Expression:
        """Inequality, or non-membership when other is a collection or subselect."""
        return _compare(self, CompareOp.NE, other)

    def lt(self, other: Any) -> Expression:
        return _compare(self, CompareOp.LT, other)

    def le(self, other: Any) -> Expression:
        return _compare(self, CompareOp.LE, other)

    def gt(self, other: Any) -> Expression:
        return _compare(self, CompareOp.GT, other)

    def ge(self, other: Any) -> Expression:
        return _compare(self, CompareOp.GE, other)


@dataclass(frozen=True, eq=True)
class FieldTerm(Term):
    """Reads one field of the statement."""

    part: Field

    def extract(self, statement: Statement) -> Any:
        match self.part:
            case Field.SUBJECT:
                return statement.subject
            case Field.PREDICATE:
                return statement.predicate
            case Field.OBJECT:
                return statement.object
            case Field.STATEMENT_ID:
                return statement.id
            case Field.RESOURCE_TYPE:
                return statement.kind

    def __str__(self) -> str:
        return self.part.name.lower()


@dataclass(frozen=True, eq=True)
class AttributeTerm(Term):
    """Object text of statements whose predicate equals name.

    Statements with any other predicate yield no value, so
    ``attribute(n).eq(v)`` matches predicate and object on the same
    statement rather than joining across statements.
    """

    name: str

    def extract(self, statement: Statement) -> Any:
        if statement.predicate != self.name:
            return None
        return statement.object

    def __str__(self) -> str:
        return f"attribute({self.name!r})"


@dataclass(frozen=True, eq=True)
class ConvertedTerm(Term):
    """Applies a conversion to another term's value.

    The conversion only runs when the inner term has a value. A conversion
    raising ValueError or TypeError is reported as ConversionError for the
    statement being evaluated; no default is substituted.
    """

    inner: Term
    convert: Callable[[Any], Any]
    name: str = "convert"

    def extract(self, statement: Statement) -> Any:
        value = self.inner.extract(statement)
        if value is None:
            return None
        try:
            return self.convert(value)
        except (ValueError, TypeError) as e:
            raise ConversionError(statement.id, value, self.name) from e

    def __str__(self) -> str:
        return f"{self.name}({self.inner})"


@dataclass(frozen=True)
class WholeStatement:
    """Projection returning the matched Statement itself."""

    def __str__(self) -> str:
        return "*"


Projection = Term | WholeStatement


@dataclass(frozen=True)
class Subselect:
    """Lazy nested select used as a membership operand.

    Materialized exactly once per outer select call, before the scan.
    """

    projection: Projection
    expression: Expression


@dataclass(frozen=True)
class Comparison:
    """Atomic comparison of a term against a constant or another term."""

    term: Term
    op: CompareOp
    operand: Any


@dataclass(frozen=True)
class MemberOf:
    """Membership of a term's value in a subselect or a fixed set of values.

    With negated set, matches statements whose value is outside the set.
    Statements where the term has no value never match either way.
    """

    term: Term
    source: Subselect | frozenset[Any]
    negated: bool = False


@dataclass(frozen=True)
class And:
    """All operands match. Evaluated left to right, short-circuiting."""

    operands: tuple[Expression, ...]


@dataclass(frozen=True)
class Or:
    """Any operand matches. Evaluated left to right, short-circuiting."""

    operands: tuple[Expression, ...]


@dataclass(frozen=True)
class Not:
    """Operand does not match."""

    operand: Expression


@dataclass(frozen=True)
class Everything:
    """Matches every statement."""

    pass


Expression = Comparison | MemberOf | And | Or | Not | Everything

_COLLECTIONS = (list, tuple, set, frozenset)


def _compare(term: Term, op: CompareOp, other: Any) -> Expression:
    if isinstance(other, (Subselect, *_COLLECTIONS)):
        if op not in (CompareOp.EQ, CompareOp.NE):
            raise QueryError(f"Operator {op.value} cannot take a set of values")
        source = other if isinstance(other, Subselect) else _freeze(other)
        return MemberOf(term=term, source=source, negated=op is CompareOp.NE)
    if isinstance(other, WholeStatement) or _is_expression(other):
        raise TypeError(f"Cannot compare {term} against {other!r}")
    return Comparison(term=term, op=op, operand=other)


def _freeze(values: Iterable[Any]) -> frozenset[Any]:
    try:
        return frozenset(values)
    except TypeError as e:
        raise QueryError("Membership values must be hashable") from e


def _is_expression(value: Any) -> bool:
    return isinstance(value, (Comparison, MemberOf, And, Or, Not, Everything))

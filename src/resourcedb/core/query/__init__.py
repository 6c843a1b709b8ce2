"""Query functionality: terms, expression combinators, and evaluation."""

from resourcedb.core.query.evaluation import execute, matches, project
from resourcedb.core.query.models import (
    And,
    AttributeTerm,
    CompareOp,
    Comparison,
    ConversionError,
    ConvertedTerm,
    Everything,
    Expression,
    Field,
    FieldTerm,
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
from resourcedb.core.query.operations import (
    and_,
    as_int,
    attribute,
    converted,
    everything,
    not_,
    object,
    or_,
    predicate,
    reification_id,
    resource_type,
    statement_id,
    statements,
    subject,
    subselect,
)

__all__ = [
    # Models
    "Term",
    "Field",
    "FieldTerm",
    "AttributeTerm",
    "ConvertedTerm",
    "WholeStatement",
    "Projection",
    "CompareOp",
    "Comparison",
    "MemberOf",
    "And",
    "Or",
    "Not",
    "Everything",
    "Expression",
    "Subselect",
    "QueryError",
    "ConversionError",
    "ProjectionError",
    # Operations
    "subject",
    "predicate",
    "object",
    "statement_id",
    "resource_type",
    "statements",
    "everything",
    "attribute",
    "as_int",
    "reification_id",
    "converted",
    "and_",
    "or_",
    "not_",
    "subselect",
    # Evaluation
    "execute",
    "matches",
    "project",
]

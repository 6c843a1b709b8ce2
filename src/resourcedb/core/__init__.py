"""Core functionalities: stateless statement and query primitives.

Architecture Note:
    core/ contains pure, stateless functionalities. Statements and query
    expressions are immutable values; evaluation reads a sequence of
    statements without mutating it. For the stateful store, see storage/.
"""

from resourcedb.core.query import (
    ConversionError,
    Expression,
    Projection,
    ProjectionError,
    QueryError,
    Subselect,
    Term,
    and_,
    as_int,
    attribute,
    converted,
    everything,
    execute,
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
from resourcedb.core.statement import (
    Literal,
    ObjectKind,
    ObjectValue,
    Resource,
    ResourceRef,
    Statement,
    StatementRef,
    literal,
    parse_reification,
    reification_token,
    resource,
)

__all__ = [
    # Statement
    "Statement",
    "ObjectKind",
    "Literal",
    "Resource",
    "StatementRef",
    "ResourceRef",
    "ObjectValue",
    "resource",
    "literal",
    "reification_token",
    "parse_reification",
    # Query
    "Term",
    "Expression",
    "Projection",
    "Subselect",
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
    "execute",
    "QueryError",
    "ConversionError",
    "ProjectionError",
]

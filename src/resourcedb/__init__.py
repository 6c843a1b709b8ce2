"""resourcedb: embeddable in-memory resource statement database.

Usage:
    from resourcedb import (
        ResourceDatabase, and_, as_int, attribute, literal, object,
        predicate, resource, subject, subselect,
    )

    db = ResourceDatabase()
    claim = db.add_statement(resource("PiiResourceDatabase", "my:designer", "Topi"))
    db.add_statement(literal(claim, "my:evaluation", "true"))  # statement about a statement
    db.add_statement(resource("Topi", "my:wife", "Anna"))
    db.add_statement(literal("Topi", "my:kids", "6"))

    # Wives of everyone with more than five kids
    db.select(
        object,
        and_(
            predicate.eq("my:wife"),
            subject.eq(subselect(subject, and_(predicate.eq("my:kids"), as_int(object).gt(5)))),
        ),
    )
"""

__version__ = "0.1.0"

# Config
from resourcedb.config import DatabaseSettings

# Core primitives
from resourcedb.core import (
    ConversionError,
    Expression,
    Literal,
    ObjectKind,
    Projection,
    ProjectionError,
    QueryError,
    Resource,
    ResourceRef,
    Statement,
    StatementRef,
    Term,
    and_,
    as_int,
    attribute,
    converted,
    everything,
    literal,
    not_,
    object,
    or_,
    parse_reification,
    predicate,
    reification_id,
    reification_token,
    resource,
    resource_type,
    statement_id,
    statements,
    subject,
    subselect,
)

# Storage
from resourcedb.storage import (
    LocalStatementStore,
    ResourceDatabase,
    StatementIdAllocator,
    StatementNotFoundError,
    StatementStore,
    StoreCapacityError,
    select,
)

__all__ = [
    # Version
    "__version__",
    # Statement
    "Statement",
    "ObjectKind",
    "Literal",
    "Resource",
    "StatementRef",
    "ResourceRef",
    "resource",
    "literal",
    "reification_token",
    "parse_reification",
    # Query
    "Term",
    "Expression",
    "Projection",
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
    "select",
    "QueryError",
    "ConversionError",
    "ProjectionError",
    # Storage
    "StatementStore",
    "LocalStatementStore",
    "ResourceDatabase",
    "StatementIdAllocator",
    "StatementNotFoundError",
    "StoreCapacityError",
    # Config
    "DatabaseSettings",
]

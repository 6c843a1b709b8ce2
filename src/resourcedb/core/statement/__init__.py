"""Statement functionality: the triple model, tagged object values, and factories."""

from resourcedb.core.statement.models import (
    Literal,
    ObjectKind,
    ObjectValue,
    Resource,
    ResourceRef,
    Statement,
    StatementRef,
    parse_reification,
    reification_token,
    to_resource_ref,
)
from resourcedb.core.statement.operations import literal, resource

__all__ = [
    # Models
    "Statement",
    "ObjectKind",
    "Literal",
    "Resource",
    "StatementRef",
    "ResourceRef",
    "ObjectValue",
    "reification_token",
    "parse_reification",
    "to_resource_ref",
    # Operations
    "resource",
    "literal",
]

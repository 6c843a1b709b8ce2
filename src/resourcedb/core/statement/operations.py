"""Statement factories.

Factories build statements without inserting them, so a caller can add a
claim, take its id, and then decide whether to reify it:

    claim_id = store.add_statement(resource("PiiResourceDatabase", "my:designer", "Topi"))
    store.add_statement(literal(claim_id, "my:evaluation", "true"))
"""

from __future__ import annotations

from resourcedb.core.statement.models import ObjectKind, Resource, Statement, StatementRef


def resource(
    subject: str | int | Resource | StatementRef, predicate: str, object: str | int
) -> Statement:
    """Create a statement whose object references another resource.

    Args:
        subject: Subject text, or a statement id to reify.
        predicate: Predicate text.
        object: Referenced resource name, or a statement id.

    Returns:
        Unstored statement (id -1) tagged RESOURCE.
    """
    if isinstance(object, int) and not isinstance(object, bool):
        return Statement(subject, predicate, StatementRef(object), ObjectKind.RESOURCE)
    return Statement(subject, predicate, object, ObjectKind.RESOURCE)


def literal(subject: str | int | Resource | StatementRef, predicate: str, object: str) -> Statement:
    """Create a statement whose object is plain text.

    Args:
        subject: Subject text, or a statement id to reify.
        predicate: Predicate text.
        object: Literal text.

    Returns:
        Unstored statement (id -1) tagged LITERAL.
    """
    return Statement(subject, predicate, object, ObjectKind.LITERAL)

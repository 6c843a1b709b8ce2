"""Statement models: object kinds, tagged object values, and the Statement triple.

Usage:
    s = Statement("Topi", "my:wife", "Anna", ObjectKind.RESOURCE)
    claim = Statement(0, "my:evaluation", "true")  # subject becomes "[0]"

    s.object_value  # Resource(name='Anna')
    claim.subject_ref  # StatementRef(statement_id=0)
"""

from __future__ import annotations

import builtins
import re
from dataclasses import dataclass
from enum import Enum, auto

_REIFICATION = re.compile(r"\[(0|[1-9]\d*)\]")


class ObjectKind(Enum):
    """How the object of a statement is interpreted."""

    INVALID = auto()
    LITERAL = auto()  # Plain text data
    RESOURCE = auto()  # Reference to another subject


@dataclass(frozen=True, slots=True)
class Literal:
    """Object value interpreted as plain text."""

    text: str

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.LITERAL


@dataclass(frozen=True, slots=True)
class Resource:
    """Reference to a named resource."""

    name: str

    @property
    def text(self) -> str:
        return self.name

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.RESOURCE


@dataclass(frozen=True, slots=True)
class StatementRef:
    """Reference to another statement by id (reification).

    Renders as ``"[<id>]"`` at the text boundary.
    """

    statement_id: int

    def __post_init__(self) -> None:
        if self.statement_id < 0:
            raise ValueError(f"Cannot reference statement id {self.statement_id}")

    @property
    def text(self) -> str:
        return reification_token(self.statement_id)

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.RESOURCE


ResourceRef = Resource | StatementRef
ObjectValue = Literal | Resource | StatementRef


def reification_token(statement_id: int) -> str:
    """Wrap a statement id as the ``"[id]"`` text used to reify it."""
    return f"[{statement_id}]"


def parse_reification(text: str) -> int:
    """Extract the statement id from a ``"[id]"`` token.

    Args:
        text: Resource text to inspect.

    Returns:
        The wrapped id, or -1 if text is not a reification token.
    """
    match = _REIFICATION.fullmatch(text)
    return int(match.group(1)) if match else -1


def to_resource_ref(value: str | int | Resource | StatementRef) -> ResourceRef:
    """Convert boundary text or an integer id to its internal reference form.

    ``"[12]"`` and ``12`` both become ``StatementRef(12)``; any other text
    becomes a plain ``Resource``.

    Raises:
        TypeError: If value is not text, an int, or a reference.
        ValueError: If value is a negative int, which names no statement.
    """
    if isinstance(value, (Resource, StatementRef)):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot use bool {value!r} as a resource reference")
    if isinstance(value, int):
        return StatementRef(value)
    if isinstance(value, str):
        statement_id = parse_reification(value)
        return StatementRef(statement_id) if statement_id >= 0 else Resource(value)
    raise TypeError(f"Invalid resource reference: {value!r}")


@dataclass(frozen=True)
class Statement:
    """A (subject, predicate, object) fact with an id assigned by the store.

    Immutable - with_id() returns a new Statement instance. Equality is
    value-based over all fields, so a statement built from ``"[3]"`` equals
    one built from the integer subject ``3``.

    Args:
        subject: Subject text, or an int that is converted to ``"[n]"``.
        predicate: Predicate text. May be empty.
        object: Object text interpreted according to kind, or a tagged value.
        kind: Object kind. A tagged object must carry this same kind.
        id: Statement id; -1 until the statement is stored.

    Raises:
        TypeError: If a tagged object disagrees with kind.
        ValueError: If subject or object reifies a negative id.
    """

    subject_ref: ResourceRef = Resource("")
    predicate: str = ""
    object_value: ObjectValue | None = None
    id: int = -1

    def __init__(
        self,
        subject: str | int | Resource | StatementRef = "",
        predicate: str = "",
        object: str | ObjectValue = "",
        kind: ObjectKind = ObjectKind.LITERAL,
        id: int = -1,
    ):
        value: ObjectValue | None
        if kind is ObjectKind.INVALID:
            value = None
        elif isinstance(object, (Literal, Resource, StatementRef)):
            if object.kind is not kind:
                raise TypeError(f"Object {object!r} does not match kind {kind.name}")
            value = object
        elif not isinstance(object, str):
            raise TypeError(f"Invalid statement object: {object!r}")
        elif kind is ObjectKind.RESOURCE:
            value = to_resource_ref(object)
        else:
            value = Literal(object)
        _set = builtins.object.__setattr__
        _set(self, "subject_ref", to_resource_ref(subject))
        _set(self, "predicate", predicate)
        _set(self, "object_value", value)
        _set(self, "id", id)

    @property
    def subject(self) -> str:
        """Subject text; reified subjects render as ``"[id]"``."""
        return self.subject_ref.text

    @property
    def object(self) -> str:
        """Object text, or an empty string for an invalid statement."""
        return self.object_value.text if self.object_value is not None else ""

    @property
    def kind(self) -> ObjectKind:
        return self.object_value.kind if self.object_value is not None else ObjectKind.INVALID

    def is_valid(self) -> bool:
        """Check whether the statement can be stored.

        A statement is valid iff subject and object are non-empty and the
        object kind is not INVALID. The predicate may be empty.
        """
        return bool(self.subject) and self.kind is not ObjectKind.INVALID and bool(self.object)

    def with_id(self, id: int) -> Statement:
        """Copy of this statement carrying a different id."""
        return Statement(self.subject_ref, self.predicate, self.object_value, self.kind, id)

    def __str__(self) -> str:
        if self.kind is ObjectKind.RESOURCE:
            rendered = f"<{self.object}>"
        elif self.kind is ObjectKind.LITERAL:
            rendered = f'"{self.object}"'
        else:
            rendered = "(invalid)"
        return f"{self.subject} {self.predicate} {rendered}"


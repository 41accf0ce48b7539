"""
Datatype kinds.

``Kind`` names the datatype a raw string is validated against (the "check
value against declared kind" path). ``ListKind`` parameterizes a list over one
primitive kind.

Naming policy mirrors the wire format: member names are UPPER_SNAKE, serialized
values are the lower-case datatype names used in schemas and on the CLI.

Examples:
    >>> from regitem.core.kind import Kind, ListKind, kind_from_value
    >>> kind_from_value("curie") is Kind.CURIE
    True
    >>> str(ListKind(Kind.CURIE))
    'list(curie)'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import UnknownType

__all__ = [
    "Kind",
    "ListKind",
    "KindLike",
    "PRIMITIVES",
    "kind_from_value",
]


class Kind(Enum):
    """Closed set of primitive datatypes."""

    BOOL = "bool"
    CURIE = "curie"
    DATETIME = "datetime"
    HASH = "hash"
    INAPPLICABLE = "inapplicable"
    INTEGER = "integer"
    PERIOD = "period"
    POINT = "point"
    POLYGON = "polygon"
    STRING = "string"
    TEXT = "text"
    TIMESTAMP = "timestamp"
    UNKNOWN = "unknown"
    UNTYPED = "untyped"
    URL = "url"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ListKind:
    """
    Cardinality-n kind: a list whose elements all parse as ``inner``.

    Attributes:
        inner (Kind): Element kind. Always primitive, so lists cannot nest.
    """

    inner: Kind

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Kind):
            raise TypeError(f"ListKind inner must be a primitive Kind, got {self.inner!r}")

    def __str__(self) -> str:
        return f"list({self.inner.value})"


KindLike = Union[Kind, ListKind]

PRIMITIVES: tuple[str, ...] = tuple(k.value for k in Kind)


def kind_from_value(s: str) -> Kind:
    """
    Parse a lower-case datatype name into a Kind.

    Args:
        s (str): Datatype name, e.g. "point".

    Returns:
        Kind: Matching kind.

    Raises:
        UnknownType: If ``s`` names no supported datatype.
    """
    try:
        return Kind(s)
    except ValueError as exc:
        raise UnknownType(s) from exc

"""
Core exception types raised by field validation, value parsing, the canonical
codec, and content addressing.

Provides typed exceptions for core-domain failures:
- FieldError (and subclasses) for illegal, unknown, or duplicated field names.
- InvalidValueError (and one subclass per datatype) for strings that do not
  conform to a declared Kind. Most wrap the originating sub-parser error,
  reachable through ``.cause``.
- CodecError for JSON text that cannot be decoded into an Item.
- NotCanonicalError when raw input differs from its own canonical form.

Notes:
    - Every error derives from the builtin ValueError; callers that only care
      about "bad input" can catch ValueError.
    - This module uses only the Python standard library and has no side effects.
    - Per-datatype sub-parser errors (UrlError, HashError, ...) live next to
      their parsers in ``regitem.values``.

Examples:
    Inspect the cause of a failed parse.

    >>> from regitem.core.errors import InvalidHash
    >>> from regitem.core.kind import Kind
    >>> from regitem.core.value import parse
    >>> try:
    ...     parse("md5:abc", Kind.HASH)
    ... except InvalidHash as e:
    ...     msg = str(e.cause)
    >>> msg
    'Invalid algorithm'
"""

from __future__ import annotations

__all__ = [
    "FieldError",
    "InvalidFieldname",
    "UnknownField",
    "DuplicateField",
    "InvalidValueError",
    "UnknownType",
    "InvalidUrl",
    "InvalidBool",
    "InvalidInteger",
    "InvalidUnknown",
    "InvalidInapplicable",
    "InvalidText",
    "InvalidHash",
    "InvalidCurie",
    "InvalidTimestamp",
    "InvalidDatetime",
    "InvalidPeriod",
    "InvalidPoint",
    "InvalidPolygon",
    "InvalidList",
    "CodecError",
    "NotCanonicalError",
]


# ============================================================================
# Field names
# ============================================================================


class FieldError(ValueError):
    """Field name failure (illegal alphabet, unknown or repeated field)."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"invalid field {name}")


class InvalidFieldname(FieldError):
    """Field name contains a character outside ``[a-z-]``."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"invalid field name {name}")


class UnknownField(FieldError):
    """Field name is not present where it was expected."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"unknown field {name}")


class DuplicateField(FieldError):
    """Field name appears more than once in a single JSON object."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"duplicate field {name}")


# ============================================================================
# Values
# ============================================================================


class InvalidValueError(ValueError):
    """
    A raw string does not conform to the requested Kind.

    Attributes:
        kind (str | None): Name of the Kind the value was checked against.
        cause (BaseException | None): Underlying sub-parser error, if any.
    """

    message = "Invalid value"
    kind: str | None = None

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class UnknownType(InvalidValueError):
    """Requested kind name is not one of the supported datatypes."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown type {name}")


class InvalidUrl(InvalidValueError):
    message = "Invalid url"
    kind = "url"


class InvalidBool(InvalidValueError):
    message = "Invalid boolean"
    kind = "bool"


class InvalidInteger(InvalidValueError):
    message = "Invalid integer"
    kind = "integer"


class InvalidUnknown(InvalidValueError):
    message = "Invalid unknown"
    kind = "unknown"


class InvalidInapplicable(InvalidValueError):
    message = "Invalid inapplicable"
    kind = "inapplicable"


class InvalidText(InvalidValueError):
    message = "Invalid text"
    kind = "text"


class InvalidHash(InvalidValueError):
    message = "Invalid hash"
    kind = "hash"


class InvalidCurie(InvalidValueError):
    message = "Invalid curie"
    kind = "curie"


class InvalidTimestamp(InvalidValueError):
    message = "Invalid timestamp"
    kind = "timestamp"


class InvalidDatetime(InvalidValueError):
    message = "Invalid datetime"
    kind = "datetime"


class InvalidPeriod(InvalidValueError):
    message = "Invalid period"
    kind = "period"


class InvalidPoint(InvalidValueError):
    message = "Invalid point"
    kind = "point"


class InvalidPolygon(InvalidValueError):
    message = "Invalid polygon"
    kind = "polygon"


class InvalidList(InvalidValueError):
    """One element of a list value failed to parse against the inner kind."""

    message = "Invalid list"
    kind = "list"


# ============================================================================
# Codec / content addressing
# ============================================================================


class CodecError(ValueError):
    """JSON text cannot be decoded into an Item (structure, token, or value shape)."""


class NotCanonicalError(ValueError):
    """Raw item bytes differ from their canonical JSON form."""

    def __init__(self, message: str = "The given item is not canonical") -> None:
        super().__init__(message)

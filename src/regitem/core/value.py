"""
Item values: the closed set of variants and kind-directed parsing.

``Value`` is the union of every variant model. Scalar variants (untyped,
unknown, inapplicable, bool, string, integer) and lists are defined here; rich
datatypes come from ``regitem.values``.

Encoding summary (used by the canonical codec):

| Variant       | JSON                        | Display      |
|---------------|-----------------------------|--------------|
| Untyped       | string                      | as is        |
| Unknown       | null                        | null         |
| Inapplicable  | {"type":"inapplicable"}     | N/A          |
| Bool          | true / false                | true / false |
| String        | string                      | as is        |
| Integer       | number                      | decimal      |
| ValueList     | array of element encodings  | ;-joined     |
| others        | canonical display string    | see module   |

``parse(raw, kind)`` never lets a malformed input escape untagged: every failure
is an ``InvalidValueError`` subclass, chained to the sub-parser error when one
exists.

Examples:
    >>> from regitem.core.kind import Kind, ListKind
    >>> from regitem.core.value import parse
    >>> parse("true", Kind.BOOL)
    Bool(value=True)
    >>> str(parse("POINT (0 0)", Kind.POINT))
    'POINT (0 0)'
    >>> [str(v) for v in parse("a:b;c:d", ListKind(Kind.CURIE)).items]
    ['a:b', 'c:d']
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Final, Union

from pydantic import StrictBool, StrictInt, StrictStr, ValidationError, field_validator

from regitem.values import (
    Curie,
    CurieError,
    Datetime,
    DatetimeError,
    Hash,
    HashError,
    Period,
    PeriodError,
    Point,
    PointError,
    Polygon,
    PolygonError,
    Text,
    TextError,
    Timestamp,
    TimestampError,
    Url,
    UrlError,
)
from regitem.values.base import ValueModel, reject_surrogates

from .errors import (
    InvalidBool,
    InvalidCurie,
    InvalidDatetime,
    InvalidHash,
    InvalidInapplicable,
    InvalidInteger,
    InvalidList,
    InvalidPeriod,
    InvalidPoint,
    InvalidPolygon,
    InvalidText,
    InvalidTimestamp,
    InvalidUnknown,
    InvalidUrl,
    InvalidValueError,
)
from .grammar import pattern
from .kind import Kind, KindLike, ListKind, kind_from_value

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "LIST_SEPARATOR",
    "Untyped",
    "Unknown",
    "Inapplicable",
    "Bool",
    "String",
    "Integer",
    "ValueList",
    "Value",
    "VALUE_TYPES",
    "parse",
]

logger = logging.getLogger(__name__)

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Cardinality-n values are written as one string with this separator.
LIST_SEPARATOR: Final[str] = ";"


# ============================================================================
# Scalar variants
# ============================================================================


class Untyped(ValueModel):
    """Raw string accepted without a known datatype. Always valid."""

    kind = Kind.UNTYPED

    value: StrictStr

    def __init__(self, value: str, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _check_value(cls, v: str) -> str:
        return reject_surrogates(v)

    def __str__(self) -> str:
        return self.value


class Unknown(ValueModel):
    """Applicable but missing value."""

    kind = Kind.UNKNOWN

    def __str__(self) -> str:
        return "null"

    def to_json_value(self) -> None:
        return None


class Inapplicable(ValueModel):
    """Value that does not apply to this item."""

    kind = Kind.INAPPLICABLE

    def __str__(self) -> str:
        return "N/A"

    def to_json_value(self) -> dict[str, str]:
        return {"type": "inapplicable"}


class Bool(ValueModel):
    kind = Kind.BOOL

    value: StrictBool

    def __init__(self, value: bool, **data: Any) -> None:
        super().__init__(value=value, **data)

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def to_json_value(self) -> bool:
        return self.value


class String(ValueModel):
    """UTF-8 string; no further validation."""

    kind = Kind.STRING

    value: StrictStr

    def __init__(self, value: str, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _check_value(cls, v: str) -> str:
        return reject_surrogates(v)

    def __str__(self) -> str:
        return self.value


class Integer(ValueModel):
    """Signed 64-bit decimal integer."""

    kind = Kind.INTEGER

    value: StrictInt

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def _check_range(cls, v: int) -> int:
        if not INT64_MIN <= v <= INT64_MAX:
            raise ValueError("integer must fit in a signed 64-bit range")
        return v

    def __str__(self) -> str:
        return str(self.value)

    def to_json_value(self) -> int:
        return self.value


class ValueList(ValueModel):
    """
    Ordered sequence of values.

    Elements are expected to share one variant; nested lists are discouraged
    and cannot be produced by ``parse``.
    """

    items: tuple[Value, ...] = ()

    def __init__(self, items: tuple[Value, ...] | list[Value] = (), **data: Any) -> None:
        super().__init__(items=tuple(items), **data)

    def __str__(self) -> str:
        return LIST_SEPARATOR.join(str(v) for v in self.items)

    def to_json_value(self) -> list[Any]:
        return [v.to_json_value() for v in self.items]


Value = Union[
    Untyped,
    Unknown,
    Inapplicable,
    Bool,
    String,
    Text,
    Integer,
    Datetime,
    Timestamp,
    Period,
    Point,
    Polygon,
    Curie,
    Hash,
    Url,
    ValueList,
]

ValueList.model_rebuild()

VALUE_TYPES: Final[tuple[type[ValueModel], ...]] = (
    Untyped,
    Unknown,
    Inapplicable,
    Bool,
    String,
    Text,
    Integer,
    Datetime,
    Timestamp,
    Period,
    Point,
    Polygon,
    Curie,
    Hash,
    Url,
    ValueList,
)


# ============================================================================
# Kind-directed parsing
# ============================================================================


def _parse_bool(raw: str) -> Bool:
    if raw == "true":
        return Bool(True)
    if raw == "false":
        return Bool(False)
    raise InvalidBool() from ValueError("provided string was not `true` or `false`")


def _parse_integer(raw: str) -> Integer:
    if not pattern("integer").fullmatch(raw):
        cause = "cannot parse integer from empty string" if not raw else "invalid digit found in string"
        raise InvalidInteger() from ValueError(cause)
    n = int(raw)
    if not INT64_MIN <= n <= INT64_MAX:
        side = "large" if n > 0 else "small"
        raise InvalidInteger() from ValueError(f"number too {side} to fit in target type")
    return Integer(n)


def _parse_inapplicable(raw: str) -> Inapplicable:
    if raw.lower() in ("na", "n/a"):
        return Inapplicable()
    raise InvalidInapplicable()


def _parse_unknown(raw: str) -> Unknown:
    if raw.lower() == "null":
        return Unknown()
    raise InvalidUnknown()


def _delegate(
    parser: Callable[[str], ValueModel],
    sub_error: type[ValueError],
    error: type[InvalidValueError],
) -> Callable[[str], ValueModel]:
    """Wrap a datatype parser so its failures surface as ``error`` chained to the cause."""

    def run(raw: str) -> ValueModel:
        try:
            return parser(raw)
        except (sub_error, ValidationError) as exc:
            raise error() from exc

    return run


def _plain(variant: Callable[[str], ValueModel]) -> Callable[[str], ValueModel]:
    def run(raw: str) -> ValueModel:
        try:
            return variant(raw)
        except ValidationError as exc:
            raise InvalidValueError() from exc

    return run


_PARSERS: Final[Mapping[Kind, Callable[[str], ValueModel]]] = MappingProxyType(
    {
        Kind.BOOL: _parse_bool,
        Kind.CURIE: _delegate(Curie.parse, CurieError, InvalidCurie),
        Kind.DATETIME: _delegate(Datetime.parse, DatetimeError, InvalidDatetime),
        Kind.HASH: _delegate(Hash.parse, HashError, InvalidHash),
        Kind.INAPPLICABLE: _parse_inapplicable,
        Kind.INTEGER: _parse_integer,
        Kind.PERIOD: _delegate(Period.parse, PeriodError, InvalidPeriod),
        Kind.POINT: _delegate(Point.parse, PointError, InvalidPoint),
        Kind.POLYGON: _delegate(Polygon.parse, PolygonError, InvalidPolygon),
        Kind.STRING: _plain(String),
        Kind.TEXT: _delegate(Text.parse, TextError, InvalidText),
        Kind.TIMESTAMP: _delegate(Timestamp.parse, TimestampError, InvalidTimestamp),
        Kind.UNKNOWN: _parse_unknown,
        Kind.UNTYPED: _plain(Untyped),
        Kind.URL: _delegate(Url.parse, UrlError, InvalidUrl),
    }
)


def _parse_list(raw: str, inner: Kind) -> ValueList:
    if raw == "":
        return ValueList()
    items: list[Value] = []
    for i, element in enumerate(raw.split(LIST_SEPARATOR)):
        try:
            items.append(_PARSERS[inner](element))
        except InvalidValueError as exc:
            raise InvalidList(f"Invalid list element {i}: {exc}") from exc
    return ValueList(items)


def parse(raw: str, kind: KindLike | str) -> Value:
    """
    Validate a raw string against one datatype and build the typed value.

    Args:
        raw (str): Input text.
        kind (Kind | ListKind | str): Target datatype; a string is resolved
            with ``kind_from_value``.

    Returns:
        Value: The parsed variant.

    Raises:
        UnknownType: If ``kind`` is a string naming no datatype.
        InvalidValueError: The kind-specific subclass (InvalidUrl, InvalidHash,
            ...). ``.cause`` holds the sub-parser error when there is one.
    """
    if isinstance(kind, str):
        kind = kind_from_value(kind)
    if isinstance(kind, ListKind):
        value: Value = _parse_list(raw, kind.inner)
    else:
        value = _PARSERS[kind](raw)
    logger.debug("parsed %r as %s", raw, kind)
    return value

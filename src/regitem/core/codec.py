"""
Canonical JSON codec for items.

``to_json`` produces the single canonical text of an Item:

- a JSON object (RFC 7159) with no insignificant whitespace;
- keys are field names (``[a-z-]``) in lexicographic order;
- ``\\uXXXX`` escapes use upper-case hex digits;
- ``/`` is never escaped;
- only control characters (U+0000..U+001F) are escaped, along with ``"`` and ``\\``.

``from_json`` decodes a JSON object into an Item. Keys must be legal field
names and may not repeat. Values are decoded generically; validating them
against a declared Kind is a separate step (``regitem.core.value.parse``).

Examples:
    >>> from regitem.core.codec import from_json, to_json
    >>> to_json(from_json('{"foo": "abc", "bar": "xyz"}'))
    '{"bar":"xyz","foo":"abc"}'
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Final, NoReturn

from .errors import CodecError, DuplicateField
from .field import Fieldname
from .grammar import pattern
from .item import Item
from .value import (
    INT64_MAX,
    INT64_MIN,
    Bool,
    Inapplicable,
    Integer,
    Unknown,
    Untyped,
    Value,
    ValueList,
)

__all__ = [
    "to_json",
    "from_json",
    "uppercase_hex",
]

logger = logging.getLogger(__name__)

_INAPPLICABLE_PAIRS = [("type", "inapplicable")]

# Arrays nested deeper than this are rejected.
MAX_DEPTH: Final[int] = 128


def uppercase_hex(s: str) -> str:
    """
    Rewrite every ``\\uXXXX`` escape in serialized JSON to upper-case hex.

    Escaped backslashes followed by ``u`` (i.e. the literal text ``\\u`` inside a
    string) are left untouched.

    Examples:
        >>> uppercase_hex('"abc\\\\u001f"')
        '"abc\\\\u001F"'
    """

    def repl(m: re.Match[str]) -> str:
        return f"{m.group(1)}\\u{m.group(2).upper()}"

    return pattern("unicode_escape").sub(repl, s)


def to_json(item: Item) -> str:
    """
    Serialize an Item to canonical JSON text.

    Args:
        item (Item): Item to serialize.

    Returns:
        str: Canonical JSON.
    """
    # Item iterates in Fieldname order; json.dumps keeps insertion order.
    obj = {str(name): value.to_json_value() for name, value in item.items()}
    text = json.dumps(obj, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    return uppercase_hex(text)


class _Pairs(list):
    """Raw key/value pairs of one decoded JSON object, duplicates included."""


def _reject_float(raw: str) -> NoReturn:
    raise CodecError(f"floating point numbers are not allowed: {raw}")


def _reject_constant(raw: str) -> NoReturn:
    raise CodecError(f"non-finite numbers are not allowed: {raw}")


def _check_text(s: str) -> str:
    if any("\ud800" <= ch <= "\udfff" for ch in s):
        raise CodecError("strings must not contain lone surrogate escapes")
    return s


def _decode_value(raw: Any, depth: int = 0) -> Value:
    if raw is None:
        return Unknown()
    if isinstance(raw, bool):
        return Bool(raw)
    if isinstance(raw, int):
        if not INT64_MIN <= raw <= INT64_MAX:
            raise CodecError(f"integer out of 64-bit range: {raw}")
        return Integer(raw)
    if isinstance(raw, str):
        return Untyped(_check_text(raw))
    if isinstance(raw, _Pairs):
        if list(raw) == _INAPPLICABLE_PAIRS:
            return Inapplicable()
        raise CodecError('objects are only allowed as {"type":"inapplicable"}')
    if isinstance(raw, list):
        if depth >= MAX_DEPTH:
            raise CodecError("invalid item JSON: nesting too deep")
        return ValueList([_decode_value(v, depth + 1) for v in raw])
    raise CodecError(f"unsupported JSON value {raw!r}")


def from_json(text: str | bytes) -> Item:
    """
    Decode a JSON object into an Item.

    Values are decoded generically, without a declared Kind. Rich values
    (Point, Url, Period, ...) are written by ``to_json`` as their display
    strings and therefore come back as ``Untyped``: for items holding them,
    ``from_json(to_json(x)) == x`` does not hold, only
    ``to_json(from_json(to_json(x))) == to_json(x)``, so hashes are preserved.
    Re-run ``parse`` on such fields to recover the typed value.

    Args:
        text (str | bytes): JSON text; bytes are decoded as UTF-8.

    Returns:
        Item: Decoded item.

    Raises:
        CodecError: On malformed JSON (with line/column context), a non-object
            top level, floats, arrays nested deeper than ``MAX_DEPTH``, or
            unsupported value shapes.
        InvalidFieldname: If a key is not a legal field name.
        DuplicateField: If a key appears twice.
    """
    try:
        raw = json.loads(
            text,
            object_pairs_hook=_Pairs,
            parse_float=_reject_float,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise CodecError(
            f"invalid item JSON: {exc.msg} at line {exc.lineno} column {exc.colno}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise CodecError(f"invalid item JSON: {exc}") from exc
    except RecursionError as exc:
        raise CodecError("invalid item JSON: nesting too deep") from exc

    if not isinstance(raw, _Pairs):
        raise CodecError("invalid item JSON: expected an object at the top level")

    item = Item()
    seen: set[Fieldname] = set()
    for key, value in raw:
        name = Fieldname(key)
        if name in seen:
            raise DuplicateField(name)
        seen.add(name)
        item.insert(name, _decode_value(value))
    logger.debug("decoded item with %d fields", len(item))
    return item

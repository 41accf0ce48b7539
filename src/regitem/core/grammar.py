"""
Compiled grammar table for field names and value datatypes.

Every regular expression used by the field, value, and codec layers is compiled
exactly once, at import time, into the read-only tables below. Parsers look
patterns up here instead of compiling their own, so there is a single place to
audit what each datatype accepts.

Responsibilities
- Define the textual grammar of every datatype that is checked by pattern
  (field names, integers, CURIE prefixes, datetimes, timestamps, durations,
  points, polygons, hash digests).
- Define the ``\\uXXXX`` escape matcher used by the canonical codec.
- Expose the tables as immutable mappings/tuples.

Design notes
------------
1) Digits are spelled ``[0-9]`` rather than ``\\d``: Python's ``\\d`` matches any
   Unicode decimal digit, which would let e.g. Arabic-Indic digits through.
2) Patterns are anchored by using ``fullmatch`` at call sites; the table stores
   unanchored bodies so they can be composed.
3) Datetime shapes are tried in declaration order and the first full match
   wins. Shapes are fixed width, so at most one can match.

Examples
--------
>>> from regitem.core.grammar import PATTERNS, DATETIME_PATTERNS
>>> bool(PATTERNS["fieldname"].fullmatch("start-date"))
True
>>> [name for name, rx in DATETIME_PATTERNS if rx.fullmatch("2018-10")]
['year_month']
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

__all__ = [
    "NUMBER",
    "PATTERNS",
    "DATETIME_PATTERNS",
    "DURATION_PATTERNS",
    "pattern",
]

# Signed decimal used for WKT coordinates. No exponent notation.
NUMBER: Final[str] = r"[+-]?[0-9]+(?:\.[0-9]+)?"

_D2: Final[str] = r"([0-9]{2})"
_YEAR: Final[str] = r"([0-9]{4})"
_DATE: Final[str] = rf"{_YEAR}-{_D2}-{_D2}"

_DURATION_DATE_PART: Final[str] = (
    r"(?:([0-9]+)Y)?(?:([0-9]+)M)?(?:([0-9]+)W)?(?:([0-9]+)D)?"
)
_DURATION_TIME_PART: Final[str] = r"(?:([0-9]+)H)?(?:([0-9]+)M)?(?:([0-9]+)S)?"

PATTERNS: Final[Mapping[str, re.Pattern[str]]] = MappingProxyType(
    {
        "fieldname": re.compile(r"[a-z-]+"),
        "integer": re.compile(r"[+-]?[0-9]+"),
        "curie_prefix": re.compile(r"[a-z][a-z0-9-]+"),
        "timestamp": re.compile(rf"{_DATE}T{_D2}:{_D2}:{_D2}Z"),
        "point": re.compile(rf"POINT \(({NUMBER}) ({NUMBER})\)"),
        "pointz": re.compile(rf"POINTZ \(({NUMBER}) ({NUMBER}) ({NUMBER})\)"),
        "polygon": re.compile(r"(POLYGONZ?) \((.*)\)", re.DOTALL),
        "polygon_body": re.compile(r"\([^()]*\)(?:,\s*\([^()]*\))*"),
        "polygon_ring": re.compile(r"\(([^()]*)\)"),
        "ring_separator": re.compile(r",\s*"),
        "coordinate": re.compile(rf"({NUMBER}) ({NUMBER})"),
        "coordinatez": re.compile(rf"({NUMBER}) ({NUMBER}) ({NUMBER})"),
        "hex_digest": re.compile(r"[0-9a-f]+"),
        # A \uXXXX escape that is not itself escaped (preceded by an even
        # number of backslashes).
        "unicode_escape": re.compile(r"(?<!\\)((?:\\\\)*)\\u([0-9a-fA-F]{4})"),
    }
)

# Ordered: first full match wins.
DATETIME_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("year", re.compile(_YEAR)),
    ("year_month", re.compile(rf"{_YEAR}-{_D2}")),
    ("date", re.compile(_DATE)),
    ("date_hour", re.compile(rf"{_DATE}T{_D2}Z")),
    ("date_hour_minute", re.compile(rf"{_DATE}T{_D2}:{_D2}Z")),
    ("full", re.compile(rf"{_DATE}T{_D2}:{_D2}:{_D2}Z")),
)

# Group layout for every alternative: Y, M, W, D, H, M, S (absent groups are None).
# The lookaheads reject a bare "P", a bare "PT", and a trailing "T".
DURATION_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("date", re.compile(rf"P(?=[0-9]){_DURATION_DATE_PART}()()()")),
    ("time", re.compile(rf"PT(?=[0-9])()()()(){_DURATION_TIME_PART}")),
    (
        "full",
        re.compile(rf"P(?=[0-9]){_DURATION_DATE_PART}T(?=[0-9]){_DURATION_TIME_PART}"),
    ),
)


def pattern(name: str) -> re.Pattern[str]:
    """
    Look up a compiled pattern by name.

    Args:
        name (str): Key in ``PATTERNS``.

    Returns:
        re.Pattern[str]: The shared compiled pattern.

    Raises:
        KeyError: If no pattern is registered under ``name``.
    """
    try:
        return PATTERNS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown grammar pattern: {name}") from exc

"""
Rich value datatypes, one module per datatype.

Each module defines the immutable model, its sub-parser error, and a ``parse``
classmethod that validates a raw string against the datatype's grammar.
Dispatch by Kind and the scalar variants live in ``regitem.core.value``.
"""

from __future__ import annotations

from .curie import Curie, CurieError
from .datetime import Datetime, DatetimeError, DatetimePrecision
from .hash import Hash, HashAlgorithm, HashError
from .period import Duration, DurationError, Period, PeriodError, PeriodShape
from .point import Point, PointError
from .polygon import Polygon, PolygonError
from .text import HtmlFinding, Text, TextError
from .timestamp import Timestamp, TimestampError
from .url import Url, UrlError, UrlErrorReason

__all__ = [
    "Curie",
    "CurieError",
    "Datetime",
    "DatetimeError",
    "DatetimePrecision",
    "Duration",
    "DurationError",
    "Hash",
    "HashAlgorithm",
    "HashError",
    "HtmlFinding",
    "Period",
    "PeriodError",
    "PeriodShape",
    "Point",
    "PointError",
    "Polygon",
    "PolygonError",
    "Text",
    "TextError",
    "Timestamp",
    "TimestampError",
    "Url",
    "UrlError",
    "UrlErrorReason",
]

"""
Datetimes with variable precision.

Six fixed-width shapes are accepted, from a bare year to second precision,
always in UTC (``Z``):

| Precision          | Example                |
|--------------------|------------------------|
| year               | 2018                   |
| year_month         | 2018-10                |
| date               | 2018-10-11             |
| date_hour          | 2018-10-11T12Z         |
| date_hour_minute   | 2018-10-11T12:13Z      |
| full               | 2018-10-11T12:13:14Z   |

Only syntax is checked; components are not range checked (``2018-13`` parses).

Examples:
    >>> from regitem.values.datetime import Datetime
    >>> d = Datetime.parse("2018-10-11T12Z")
    >>> d.precision.value, d.hour
    ('date_hour', 12)
    >>> str(d)
    '2018-10-11T12Z'
"""

from __future__ import annotations

from enum import Enum

from pydantic import NonNegativeInt, model_validator

from regitem.core.grammar import DATETIME_PATTERNS
from regitem.core.kind import Kind

from .base import ValueModel

__all__ = [
    "DatetimeError",
    "DatetimePrecision",
    "Datetime",
]


class DatetimeError(ValueError):
    """Datetime syntax failure."""


class DatetimePrecision(Enum):
    YEAR = "year"
    YEAR_MONTH = "year_month"
    DATE = "date"
    DATE_HOUR = "date_hour"
    DATE_HOUR_MINUTE = "date_hour_minute"
    FULL = "full"


_COMPONENTS = ("year", "month", "day", "hour", "minute", "second")

# Number of leading components each precision carries.
_WIDTH: dict[DatetimePrecision, int] = {
    DatetimePrecision.YEAR: 1,
    DatetimePrecision.YEAR_MONTH: 2,
    DatetimePrecision.DATE: 3,
    DatetimePrecision.DATE_HOUR: 4,
    DatetimePrecision.DATE_HOUR_MINUTE: 5,
    DatetimePrecision.FULL: 6,
}


class Datetime(ValueModel):
    """
    A point in time truncated to ``precision``.

    Attributes:
        precision (DatetimePrecision): Which components are present.
        year (int): Four-digit year.
        month, day, hour, minute, second (int | None): Present exactly when
            the precision includes them.

    Raises:
        pydantic.ValidationError: If the populated components do not match
            ``precision``.
    """

    kind = Kind.DATETIME

    precision: DatetimePrecision
    year: NonNegativeInt
    month: NonNegativeInt | None = None
    day: NonNegativeInt | None = None
    hour: NonNegativeInt | None = None
    minute: NonNegativeInt | None = None
    second: NonNegativeInt | None = None

    @model_validator(mode="after")
    def _check_components(self) -> Datetime:
        width = _WIDTH[self.precision]
        for i, name in enumerate(_COMPONENTS):
            present = getattr(self, name) is not None
            if present != (i < width):
                state = "requires" if i < width else "does not allow"
                raise ValueError(f"precision {self.precision.value} {state} {name}")
        return self

    def __str__(self) -> str:
        out = f"{self.year:04d}"
        if self.month is not None:
            out += f"-{self.month:02d}"
        if self.day is not None:
            out += f"-{self.day:02d}"
        if self.hour is None:
            return out
        out += f"T{self.hour:02d}"
        if self.minute is not None:
            out += f":{self.minute:02d}"
        if self.second is not None:
            out += f":{self.second:02d}"
        return out + "Z"

    @classmethod
    def parse(cls, s: str) -> Datetime:
        """
        Parse one of the six datetime shapes; the first matching shape wins.

        Raises:
            DatetimeError: If ``s`` matches no shape.
        """
        for name, rx in DATETIME_PATTERNS:
            m = rx.fullmatch(s)
            if m is None:
                continue
            values = dict(zip(_COMPONENTS, (int(g) for g in m.groups())))
            return cls(precision=DatetimePrecision(name), **values)
        raise DatetimeError("Invalid datetime. Expected an ISO 8601 UTC datetime")

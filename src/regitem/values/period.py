"""
ISO 8601 durations and periods.

A period is written as one of:

- ``P1Y2M``                      bare duration
- ``2018-01-01/2019-01-01``      range between two datetimes
- ``2018-01-01/P1Y``             start datetime plus duration
- ``P1Y/2019-01-01``             duration ending at a datetime

Durations accept date components (``Y M W D``), time components after ``T``
(``H M S``), or both. Degenerate forms (``P``, ``PT``, trailing ``T`` such as
``P1YT``) are rejected.

Examples:
    >>> from regitem.values.period import Period
    >>> p = Period.parse("2018-01-01/P1Y")
    >>> p.shape.value
    'range_date_duration'
    >>> str(p)
    '2018-01-01/P1Y'
"""

from __future__ import annotations

from enum import Enum

from pydantic import NonNegativeInt, model_validator

from regitem.core.grammar import DURATION_PATTERNS
from regitem.core.kind import Kind

from .base import ValueModel
from .datetime import Datetime, DatetimeError

__all__ = [
    "DurationError",
    "PeriodError",
    "Duration",
    "PeriodShape",
    "Period",
]


class DurationError(ValueError):
    """Duration syntax failure."""


class PeriodError(ValueError):
    """Period syntax failure; chained to the failing side when there is one."""


_DATE_UNITS = (("years", "Y"), ("months", "M"), ("weeks", "W"), ("days", "D"))
_TIME_UNITS = (("hours", "H"), ("minutes", "M"), ("seconds", "S"))


class Duration(ValueModel):
    """
    ISO 8601 duration; absent components are ``None``.

    At least one component must be present.
    """

    years: NonNegativeInt | None = None
    months: NonNegativeInt | None = None
    weeks: NonNegativeInt | None = None
    days: NonNegativeInt | None = None
    hours: NonNegativeInt | None = None
    minutes: NonNegativeInt | None = None
    seconds: NonNegativeInt | None = None

    @model_validator(mode="after")
    def _check_not_empty(self) -> Duration:
        if all(getattr(self, name) is None for name, _ in _DATE_UNITS + _TIME_UNITS):
            raise ValueError("duration requires at least one component")
        return self

    def __str__(self) -> str:
        out = "P"
        for name, unit in _DATE_UNITS:
            v = getattr(self, name)
            if v is not None:
                out += f"{v}{unit}"
        time = "".join(
            f"{getattr(self, name)}{unit}"
            for name, unit in _TIME_UNITS
            if getattr(self, name) is not None
        )
        if time:
            out += "T" + time
        return out

    @classmethod
    def parse(cls, s: str) -> Duration:
        """
        Parse a bare duration against the date, time, and full alternatives.

        Raises:
            DurationError: If no alternative matches.
        """
        for _, rx in DURATION_PATTERNS:
            m = rx.fullmatch(s)
            if m is None:
                continue
            names = [name for name, _ in _DATE_UNITS + _TIME_UNITS]
            values = {name: int(g) for name, g in zip(names, m.groups()) if g}
            return cls(**values)
        raise DurationError("Invalid ISO 8601 duration.")


class PeriodShape(Enum):
    DURATION = "duration"
    RANGE = "range"
    RANGE_DATE_DURATION = "range_date_duration"
    RANGE_DURATION_DATE = "range_duration_date"


# (start, end, duration) presence -> shape
_SHAPES: dict[tuple[bool, bool, bool], PeriodShape] = {
    (False, False, True): PeriodShape.DURATION,
    (True, True, False): PeriodShape.RANGE,
    (True, False, True): PeriodShape.RANGE_DATE_DURATION,
    (False, True, True): PeriodShape.RANGE_DURATION_DATE,
}


class Period(ValueModel):
    """
    A duration, a datetime range, or a datetime anchored by a duration.

    Attributes:
        start (Datetime | None): Left datetime for ``range`` and
            ``range_date_duration``.
        end (Datetime | None): Right datetime for ``range`` and
            ``range_duration_date``.
        duration (Duration | None): Duration for every shape except ``range``.

    Raises:
        pydantic.ValidationError: If the populated sides form no valid shape.
    """

    kind = Kind.PERIOD

    start: Datetime | None = None
    end: Datetime | None = None
    duration: Duration | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> Period:
        if self._presence() not in _SHAPES:
            raise ValueError("period requires a duration, two datetimes, or one of each")
        return self

    def _presence(self) -> tuple[bool, bool, bool]:
        return (self.start is not None, self.end is not None, self.duration is not None)

    @property
    def shape(self) -> PeriodShape:
        return _SHAPES[self._presence()]

    def __str__(self) -> str:
        shape = self.shape
        if shape is PeriodShape.DURATION:
            return str(self.duration)
        if shape is PeriodShape.RANGE:
            return f"{self.start}/{self.end}"
        if shape is PeriodShape.RANGE_DATE_DURATION:
            return f"{self.start}/{self.duration}"
        return f"{self.duration}/{self.end}"

    @classmethod
    def parse(cls, s: str) -> Period:
        """
        Parse a period by splitting once on ``/``.

        Raises:
            PeriodError: On more than one slash, a duration on both sides, or a
                side that fails its own parser (chained as ``__cause__``).
        """
        parts = s.split("/")
        if len(parts) > 2:
            raise PeriodError("Invalid period. Expected at most one '/'")
        try:
            if len(parts) == 1:
                return cls(duration=Duration.parse(s))
            left, right = parts
            if left.startswith("P") and right.startswith("P"):
                raise PeriodError("Invalid period. Two durations cannot form a period")
            if left.startswith("P"):
                return cls(duration=Duration.parse(left), end=Datetime.parse(right))
            if right.startswith("P"):
                return cls(start=Datetime.parse(left), duration=Duration.parse(right))
            return cls(start=Datetime.parse(left), end=Datetime.parse(right))
        except (DurationError, DatetimeError) as exc:
            raise PeriodError(f"Invalid period. {exc}") from exc

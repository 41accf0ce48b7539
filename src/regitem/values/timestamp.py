"""
RFC 3339 timestamps constrained to UTC (``Z``) at second precision.

``T`` and ``Z`` must be upper case. Only the pattern is checked; an out of
range timestamp (``2018-13-40T25:61:61Z``) is accepted.
"""

from __future__ import annotations

from pydantic import NonNegativeInt

from regitem.core.grammar import pattern
from regitem.core.kind import Kind

from .base import ValueModel

__all__ = [
    "TimestampError",
    "Timestamp",
]


class TimestampError(ValueError):
    """Timestamp syntax failure."""


class Timestamp(ValueModel):
    kind = Kind.TIMESTAMP

    year: NonNegativeInt
    month: NonNegativeInt
    day: NonNegativeInt
    hour: NonNegativeInt
    minute: NonNegativeInt
    second: NonNegativeInt

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )

    @classmethod
    def parse(cls, s: str) -> Timestamp:
        m = pattern("timestamp").fullmatch(s)
        if m is None:
            raise TimestampError("Invalid RFC3339 timestamp.")
        year, month, day, hour, minute, second = (int(g) for g in m.groups())
        return cls(year=year, month=month, day=day, hour=hour, minute=minute, second=second)

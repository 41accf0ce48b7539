"""
Well-Known Text points.

WKT is used rather than GeoJSON because it describes the value in one string,
in line with ISO 8601 and RFC 3339 for the other datatypes, and matches
systems such as PostGIS.

Grammar::

    POINT (x y)
    POINTZ (x y z)

Exactly one space separates the keyword from the parenthesis and each
coordinate from the next. Coordinates are signed decimals without exponent.

Examples:
    >>> from regitem.values.point import Point
    >>> str(Point.parse("POINT (0 0)"))
    'POINT (0 0)'
    >>> str(Point.parse("POINTZ (-1.5 2 3.25)"))
    'POINTZ (-1.5 2 3.25)'
"""

from __future__ import annotations

import math
from decimal import Decimal

from pydantic import FiniteFloat

from regitem.core.grammar import pattern
from regitem.core.kind import Kind

from .base import ValueModel

__all__ = [
    "PointError",
    "Point",
    "format_number",
    "parse_coordinate",
]


class PointError(ValueError):
    """WKT point syntax failure."""


def format_number(x: float) -> str:
    """
    Render a coordinate so that it re-parses under the WKT number grammar.

    Whole numbers drop the fractional part (``0.0 -> "0"``) and exponent
    notation is expanded (``1e+20 -> "100000000000000000000"``).

    Args:
        x (float): Finite coordinate.

    Returns:
        str: Decimal text.
    """
    text = repr(float(x))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def parse_coordinate(text: str) -> float:
    """
    Convert one matched WKT number to a float.

    Raises:
        ValueError: If the number overflows to an infinite float.
    """
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"coordinate out of range: {text[:32]}")
    return value


class Point(ValueModel):
    """
    2-D or 3-D coordinate.

    Attributes:
        x (float): First coordinate.
        y (float): Second coordinate.
        z (float | None): Third coordinate for ``POINTZ``.
    """

    kind = Kind.POINT

    x: FiniteFloat
    y: FiniteFloat
    z: FiniteFloat | None = None

    def __str__(self) -> str:
        if self.z is None:
            return f"POINT ({format_number(self.x)} {format_number(self.y)})"
        return (
            f"POINTZ ({format_number(self.x)} {format_number(self.y)} "
            f"{format_number(self.z)})"
        )

    @classmethod
    def parse(cls, s: str) -> Point:
        """
        Parse ``POINT (x y)`` or ``POINTZ (x y z)``.

        Raises:
            PointError: If ``s`` matches neither form, or a coordinate is too
                large to be represented as a finite float.
        """
        m = pattern("point").fullmatch(s) or pattern("pointz").fullmatch(s)
        if m is None:
            raise PointError("Invalid WKT point.")
        try:
            coords = [parse_coordinate(g) for g in m.groups()]
        except ValueError as exc:
            raise PointError(f"Invalid WKT point. {exc}") from exc
        return cls(**dict(zip(("x", "y", "z"), coords)))

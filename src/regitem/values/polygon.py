"""
Well-Known Text polygons.

Grammar::

    POLYGON ((x y, x y, ...), (x y, ...), ...)
    POLYGONZ ((x y z, ...), ...)

The first ring is the outer boundary; any further rings are holes. Every
coordinate must have the dimension announced by the keyword. Ring closure,
winding order, and self-intersection are not validated.
"""

from __future__ import annotations

from pydantic import FiniteFloat, model_validator

from regitem.core.grammar import pattern
from regitem.core.kind import Kind

from .base import ValueModel
from .point import format_number, parse_coordinate

__all__ = [
    "PolygonError",
    "Polygon",
]

Coordinate = tuple[FiniteFloat, ...]
Ring = tuple[Coordinate, ...]


class PolygonError(ValueError):
    """WKT polygon syntax failure."""


class Polygon(ValueModel):
    """
    One outer ring plus zero or more inner rings.

    Attributes:
        outer (Ring): Outer boundary coordinates.
        inner (tuple[Ring, ...]): Holes.
        has_z (bool): True for ``POLYGONZ``; every coordinate then has three
            components, otherwise two.

    Raises:
        pydantic.ValidationError: If a ring is empty or a coordinate has the
            wrong dimension.
    """

    kind = Kind.POLYGON

    outer: Ring
    inner: tuple[Ring, ...] = ()
    has_z: bool = False

    @model_validator(mode="after")
    def _check_rings(self) -> Polygon:
        dim = 3 if self.has_z else 2
        for ring in (self.outer, *self.inner):
            if not ring:
                raise ValueError("polygon rings must not be empty")
            for coord in ring:
                if len(coord) != dim:
                    raise ValueError(f"polygon coordinates must have {dim} components")
        return self

    @property
    def rings(self) -> tuple[Ring, ...]:
        return (self.outer, *self.inner)

    def __str__(self) -> str:
        keyword = "POLYGONZ" if self.has_z else "POLYGON"
        body = ", ".join(
            "(" + ", ".join(" ".join(format_number(c) for c in coord) for coord in ring) + ")"
            for ring in self.rings
        )
        return f"{keyword} ({body})"

    @classmethod
    def parse(cls, s: str) -> Polygon:
        """
        Parse a WKT polygon.

        Raises:
            PolygonError: On a wrong keyword, unbalanced or empty rings, or a
                malformed coordinate or one too large for a finite float.
        """
        m = pattern("polygon").fullmatch(s)
        if m is None:
            raise PolygonError("Invalid WKT polygon.")
        keyword, body = m.groups()
        has_z = keyword == "POLYGONZ"
        if not pattern("polygon_body").fullmatch(body):
            raise PolygonError("Invalid WKT polygon. Expected a list of rings")

        coord_rx = pattern("coordinatez" if has_z else "coordinate")
        rings: list[Ring] = []
        for group in pattern("polygon_ring").findall(body):
            if not group.strip():
                raise PolygonError("Invalid WKT polygon. Empty ring")
            ring: list[Coordinate] = []
            for raw in pattern("ring_separator").split(group):
                cm = coord_rx.fullmatch(raw)
                if cm is None:
                    raise PolygonError(f"Invalid WKT polygon. Malformed coordinate {raw!r}")
                try:
                    ring.append(tuple(parse_coordinate(g) for g in cm.groups()))
                except ValueError as exc:
                    raise PolygonError(f"Invalid WKT polygon. {exc}") from exc
            rings.append(tuple(ring))

        return cls(outer=rings[0], inner=tuple(rings[1:]), has_z=has_z)

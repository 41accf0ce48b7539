import pytest
from pydantic import ValidationError

from regitem.values import Point, PointError, Polygon, PolygonError
from regitem.values.point import format_number


@pytest.mark.parametrize(
    "x,expected",
    [(0.0, "0"), (-0.0, "-0"), (1.5, "1.5"), (-12.0, "-12"), (1e20, "100000000000000000000"), (1.5e-7, "0.00000015")],
)
def test_format_number(x: float, expected: str) -> None:
    assert format_number(x) == expected


@pytest.mark.parametrize("raw", ["POINT (0 0)", "POINT (-1.5 2.25)", "POINTZ (-1.5 2 3.25)"])
def test_point_round_trips(raw: str) -> None:
    assert str(Point.parse(raw)) == raw


def test_point_components() -> None:
    p = Point.parse("POINTZ (1 -2 3.5)")
    assert (p.x, p.y, p.z) == (1.0, -2.0, 3.5)
    assert Point.parse("POINT (+1 0)") == Point(x=1.0, y=0.0)


@pytest.mark.parametrize(
    "raw",
    [
        "POINT(0 0)",
        "POINT (0  0)",
        "POINT (0 0 0)",
        "POINTZ (0 0)",
        "POINT (1e3 0)",
        "POINT (1. 0)",
        "point (0 0)",
        "POINT (0 0) ",
    ],
)
def test_point_rejects(raw: str) -> None:
    with pytest.raises(PointError, match="Invalid WKT point"):
        Point.parse(raw)


def test_polygon_outer_ring() -> None:
    p = Polygon.parse("POLYGON ((0 0, 1 0, 1 1, 0 0))")
    assert p.outer == ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0))
    assert p.inner == ()
    assert not p.has_z
    assert str(p) == "POLYGON ((0 0, 1 0, 1 1, 0 0))"


def test_polygon_with_hole_and_normalized_spacing() -> None:
    p = Polygon.parse("POLYGON ((0 0,10 0,10 10,0 0),(1 1, 2 1, 2 2, 1 1))")
    assert len(p.rings) == 2
    assert p.inner[0][1] == (2.0, 1.0)
    assert str(p) == "POLYGON ((0 0, 10 0, 10 10, 0 0), (1 1, 2 1, 2 2, 1 1))"


def test_polygonz() -> None:
    p = Polygon.parse("POLYGONZ ((0 0 1, 1 0 1, 1 1 1, 0 0 1))")
    assert p.has_z
    assert p.outer[0] == (0.0, 0.0, 1.0)
    assert str(p) == "POLYGONZ ((0 0 1, 1 0 1, 1 1 1, 0 0 1))"


@pytest.mark.parametrize(
    "raw",
    [
        "POLYGON((0 0, 1 1))",
        "POLYGON ()",
        "POLYGON (())",
        "POLYGON ((0 0, 1 1)",
        "POLYGON ((0 0, x 1))",
        "POLYGON ((0 0 0, 1 1 1))",
        "POLYGONZ ((0 0, 1 1))",
        "POLYGON ((0 0, 1 1),)",
        "MULTIPOLYGON (((0 0)))",
    ],
)
def test_polygon_rejects(raw: str) -> None:
    with pytest.raises(PolygonError):
        Polygon.parse(raw)


def test_polygon_model_checks_dimensions() -> None:
    with pytest.raises(ValidationError):
        Polygon(outer=((0.0, 0.0, 0.0),), has_z=False)
    with pytest.raises(ValidationError):
        Polygon(outer=())


@pytest.mark.parametrize(
    "raw",
    ["POINT (" + "9" * 400 + " 0)", "POINTZ (0 0 -" + "9" * 400 + ")"],
)
def test_point_rejects_coordinates_that_overflow(raw: str) -> None:
    with pytest.raises(PointError, match="out of range"):
        Point.parse(raw)


def test_large_finite_point_round_trips() -> None:
    raw = "POINT (" + "9" * 300 + " 0)"
    p = Point.parse(raw)
    assert Point.parse(str(p)) == p


def test_polygon_rejects_coordinates_that_overflow() -> None:
    with pytest.raises(PolygonError, match="out of range"):
        Polygon.parse("POLYGON ((0 0, " + "9" * 400 + " 1, 1 1, 0 0))")


def test_models_reject_non_finite_coordinates() -> None:
    with pytest.raises(ValidationError):
        Point(x=float("inf"), y=0.0)
    with pytest.raises(ValidationError):
        Polygon(outer=((0.0, float("nan")),))

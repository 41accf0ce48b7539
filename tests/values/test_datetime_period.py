import pytest
from pydantic import ValidationError

from regitem.values import (
    Datetime,
    DatetimeError,
    DatetimePrecision,
    Duration,
    DurationError,
    Period,
    PeriodError,
    PeriodShape,
    Timestamp,
    TimestampError,
)


@pytest.mark.parametrize(
    "raw,precision",
    [
        ("2018", DatetimePrecision.YEAR),
        ("2018-10", DatetimePrecision.YEAR_MONTH),
        ("2018-10-11", DatetimePrecision.DATE),
        ("2018-10-11T12Z", DatetimePrecision.DATE_HOUR),
        ("2018-10-11T12:13Z", DatetimePrecision.DATE_HOUR_MINUTE),
        ("2018-10-11T12:13:14Z", DatetimePrecision.FULL),
    ],
)
def test_datetime_shapes(raw: str, precision: DatetimePrecision) -> None:
    d = Datetime.parse(raw)
    assert d.precision is precision
    assert d.year == 2018
    assert str(d) == raw


def test_datetime_components() -> None:
    d = Datetime.parse("0099-01-02T03:04Z")
    assert (d.year, d.month, d.day, d.hour, d.minute, d.second) == (99, 1, 2, 3, 4, None)
    assert str(d) == "0099-01-02T03:04Z"


def test_datetime_has_no_calendar_check() -> None:
    assert str(Datetime.parse("2018-13-40")) == "2018-13-40"


@pytest.mark.parametrize(
    "raw", ["18", "2018-1", "2018-10-11T12", "2018-10-11 12:00Z", "2018-10-11t12Z", "٢٠١٨"]
)
def test_datetime_rejects(raw: str) -> None:
    with pytest.raises(DatetimeError):
        Datetime.parse(raw)


def test_datetime_model_checks_precision_width() -> None:
    with pytest.raises(ValidationError):
        Datetime(precision=DatetimePrecision.DATE, year=2018, month=1)
    with pytest.raises(ValidationError):
        Datetime(precision=DatetimePrecision.YEAR, year=2018, hour=1)


def test_timestamp() -> None:
    t = Timestamp.parse("2018-10-11T12:13:14Z")
    assert (t.year, t.second) == (2018, 14)
    assert str(t) == "2018-10-11T12:13:14Z"
    assert str(Timestamp.parse("2018-13-40T25:61:61Z")) == "2018-13-40T25:61:61Z"


@pytest.mark.parametrize(
    "raw", ["2018-10-11T12:13:14", "2018-10-11t12:13:14z", "2018-10-11T12:13:14+00:00", "2018-10-11"]
)
def test_timestamp_rejects(raw: str) -> None:
    with pytest.raises(TimestampError, match="Invalid RFC3339 timestamp"):
        Timestamp.parse(raw)


@pytest.mark.parametrize("raw", ["P1Y", "P1Y2M3W4D", "PT5H", "PT1M30S", "P1DT2H", "P10Y0M"])
def test_duration_accepts(raw: str) -> None:
    assert str(Duration.parse(raw)) == raw


@pytest.mark.parametrize("raw", ["P", "PT", "P1YT", "1Y", "P1H", "PT1D", "P-1Y", "P1.5Y"])
def test_duration_rejects_degenerate_forms(raw: str) -> None:
    with pytest.raises(DurationError):
        Duration.parse(raw)


def test_duration_model_requires_a_component() -> None:
    with pytest.raises(ValidationError):
        Duration()


@pytest.mark.parametrize(
    "raw,shape",
    [
        ("P1Y2M", PeriodShape.DURATION),
        ("2018-01-01/2019-01-01", PeriodShape.RANGE),
        ("2018-01-01/P1Y", PeriodShape.RANGE_DATE_DURATION),
        ("P1Y/2019-01-01T00Z", PeriodShape.RANGE_DURATION_DATE),
    ],
)
def test_period_shapes(raw: str, shape: PeriodShape) -> None:
    p = Period.parse(raw)
    assert p.shape is shape
    assert str(p) == raw


def test_period_sides() -> None:
    p = Period.parse("2018/P3M")
    assert p.start == Datetime.parse("2018")
    assert p.duration == Duration(months=3)
    assert p.end is None


def test_period_rejects_two_slashes_and_two_durations() -> None:
    with pytest.raises(PeriodError, match="at most one"):
        Period.parse("2018/2019/2020")
    with pytest.raises(PeriodError, match="Two durations"):
        Period.parse("P1Y/P2Y")


@pytest.mark.parametrize(
    "raw,cause",
    [("P", DurationError), ("2018-01-01/PT", DurationError), ("2018-1/2019", DatetimeError)],
)
def test_period_chains_side_failure(raw: str, cause: type) -> None:
    with pytest.raises(PeriodError) as ei:
        Period.parse(raw)
    assert isinstance(ei.value.__cause__, cause)


def test_period_model_rejects_incomplete_shape() -> None:
    with pytest.raises(ValidationError):
        Period(start=Datetime.parse("2018"))

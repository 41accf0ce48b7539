import pytest

from regitem.core.errors import (
    InvalidBool,
    InvalidCurie,
    InvalidHash,
    InvalidInapplicable,
    InvalidInteger,
    InvalidList,
    InvalidPoint,
    InvalidText,
    InvalidUnknown,
    InvalidUrl,
    InvalidValueError,
    UnknownType,
)
from regitem.core.kind import Kind, ListKind
from regitem.core.value import (
    INT64_MAX,
    INT64_MIN,
    Bool,
    Inapplicable,
    Integer,
    String,
    Unknown,
    Untyped,
    ValueList,
    parse,
)
from regitem.values import Curie, Point, UrlErrorReason

DIGEST = "129332749e67eb9ab7390d7da2e88173367d001ac3e9e39f06e41690cd05e3ae"


def test_bool_literals() -> None:
    assert parse("true", Kind.BOOL) == Bool(True)
    assert parse("false", Kind.BOOL) == Bool(False)


@pytest.mark.parametrize("raw", ["True", "FALSE", "1", "", "yes"])
def test_bool_rejects_anything_else(raw: str) -> None:
    with pytest.raises(InvalidBool) as ei:
        parse(raw, Kind.BOOL)
    assert "`true` or `false`" in str(ei.value.cause)


@pytest.mark.parametrize(
    "raw,expected",
    [("0", 0), ("-12", -12), ("+7", 7), (str(INT64_MAX), INT64_MAX), (str(INT64_MIN), INT64_MIN)],
)
def test_integer_accepts_signed_64_bit(raw: str, expected: int) -> None:
    assert parse(raw, Kind.INTEGER) == Integer(expected)


@pytest.mark.parametrize(
    "raw,cause",
    [
        ("1.5", "invalid digit found in string"),
        ("1e3", "invalid digit found in string"),
        ("", "cannot parse integer from empty string"),
        (str(INT64_MAX + 1), "number too large to fit in target type"),
        (str(INT64_MIN - 1), "number too small to fit in target type"),
    ],
)
def test_integer_rejects_non_digits_and_overflow(raw: str, cause: str) -> None:
    with pytest.raises(InvalidInteger) as ei:
        parse(raw, Kind.INTEGER)
    assert str(ei.value.cause) == cause


@pytest.mark.parametrize("raw", ["na", "NA", "n/a", "N/A"])
def test_inapplicable_is_case_insensitive(raw: str) -> None:
    assert parse(raw, Kind.INAPPLICABLE) == Inapplicable()


def test_inapplicable_and_unknown_reject_other_text() -> None:
    with pytest.raises(InvalidInapplicable):
        parse("none", Kind.INAPPLICABLE)
    with pytest.raises(InvalidUnknown):
        parse("nil", Kind.UNKNOWN)


@pytest.mark.parametrize("raw", ["null", "NULL", "Null"])
def test_unknown_is_case_insensitive(raw: str) -> None:
    assert parse(raw, Kind.UNKNOWN) == Unknown()


def test_string_and_untyped_are_verbatim() -> None:
    assert parse(" any thing <b> ", Kind.STRING) == String(" any thing <b> ")
    assert parse("", Kind.UNTYPED) == Untyped("")


def test_string_rejects_lone_surrogate() -> None:
    with pytest.raises(InvalidValueError):
        parse("\ud800", Kind.STRING)


def test_kind_may_be_given_by_name() -> None:
    assert parse("POINT (0 0)", "point") == Point(x=0.0, y=0.0)
    with pytest.raises(UnknownType):
        parse("x", "nope")


def test_hash_strictness() -> None:
    assert str(parse(f"sha-256:{DIGEST}", Kind.HASH)) == f"sha-256:{DIGEST}"
    with pytest.raises(InvalidHash) as ei:
        parse(f"sha-256:{DIGEST.upper()}", Kind.HASH)
    assert "lower-case hex" in str(ei.value.cause)


def test_error_wraps_sub_parser_cause() -> None:
    with pytest.raises(InvalidHash) as ei:
        parse(f"md5:{DIGEST}", Kind.HASH)
    assert str(ei.value) == "Invalid hash"
    assert str(ei.value.cause) == "Invalid algorithm"
    assert ei.value.kind == "hash"


def test_point_requires_space_before_parenthesis() -> None:
    assert str(parse("POINT (0 0)", Kind.POINT)) == "POINT (0 0)"
    with pytest.raises(InvalidPoint):
        parse("POINT(0 0)", Kind.POINT)


def test_text_html_is_rejected() -> None:
    assert str(parse("foo *bar*", Kind.TEXT)) == "foo *bar*"
    with pytest.raises(InvalidText) as ei:
        parse("<i>oo</i>", Kind.TEXT)
    assert "HTML is not allowed in Text" in str(ei.value.cause)


def test_list_parses_each_element_against_inner_kind() -> None:
    value = parse("a:b;c:d", ListKind(Kind.CURIE))
    assert isinstance(value, ValueList)
    assert value.items == (
        Curie(prefix="a", reference="b"),
        Curie(prefix="c", reference="d"),
    )
    assert str(value) == "a:b;c:d"
    assert value.to_json_value() == ["a:b", "c:d"]


def test_list_empty_input_is_empty_list() -> None:
    assert parse("", ListKind(Kind.INTEGER)) == ValueList()


def test_list_reports_failing_element() -> None:
    with pytest.raises(InvalidList, match="Invalid list element 1") as ei:
        parse("a:b;nocolon", ListKind(Kind.CURIE))
    assert isinstance(ei.value.cause, InvalidCurie)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Untyped("x"), "x"),
        (Unknown(), None),
        (Inapplicable(), {"type": "inapplicable"}),
        (Bool(True), True),
        (Integer(-3), -3),
        (ValueList([Integer(1), Unknown()]), [1, None]),
    ],
)
def test_json_value_encodings(value, expected) -> None:
    assert value.to_json_value() == expected


def test_integer_model_enforces_range() -> None:
    with pytest.raises(ValueError):
        Integer(INT64_MAX + 1)


def test_overflowing_point_is_rejected_not_rendered_as_inf() -> None:
    with pytest.raises(InvalidPoint) as ei:
        parse("POINT (" + "9" * 400 + " 0)", Kind.POINT)
    assert "out of range" in str(ei.value.cause)


def test_url_follows_standard_grammar() -> None:
    assert str(parse("http://example.org/a/../b", Kind.URL)) == "http://example.org/b"
    with pytest.raises(InvalidUrl) as ei:
        parse("http://example.org:99999/", Kind.URL)
    assert ei.value.cause.reason is UrlErrorReason.INVALID_PORT

import pytest

from regitem.core.digest import ALGORITHM, digest, hexdigest
from regitem.core.errors import InvalidValueError, UnknownType
from regitem.core.grammar import PATTERNS, pattern
from regitem.core.kind import PRIMITIVES, Kind, ListKind, kind_from_value


def test_hexdigest_known_vector() -> None:
    assert (
        hexdigest('{"field1":"a","field2":"b"}')
        == "129332749e67eb9ab7390d7da2e88173367d001ac3e9e39f06e41690cd05e3ae"
    )
    assert ALGORITHM == "sha-256"


def test_digest_str_and_bytes_agree() -> None:
    assert digest("é") == digest("é".encode("utf-8"))
    assert len(digest("x")) == 32
    assert hexdigest("x") == digest("x").hex()
    assert hexdigest(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.mark.parametrize("kind", list(Kind))
def test_kind_round_trips_through_its_name(kind: Kind) -> None:
    assert kind_from_value(str(kind)) is kind
    assert str(kind) in PRIMITIVES


def test_unknown_kind_name() -> None:
    with pytest.raises(UnknownType, match="Unknown type foo") as ei:
        kind_from_value("foo")
    assert isinstance(ei.value, InvalidValueError)


def test_list_kind_display_and_validation() -> None:
    assert str(ListKind(Kind.CURIE)) == "list(curie)"
    assert ListKind(Kind.URL) == ListKind(Kind.URL)
    with pytest.raises(TypeError):
        ListKind(ListKind(Kind.URL))  # type: ignore[arg-type]


def test_grammar_lookup() -> None:
    assert pattern("fieldname") is PATTERNS["fieldname"]
    with pytest.raises(KeyError, match="Unknown grammar pattern"):
        pattern("nope")


def test_grammar_rejects_non_ascii_digits() -> None:
    assert pattern("integer").fullmatch("12")
    assert not pattern("integer").fullmatch("١٢")

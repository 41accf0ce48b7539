import pytest
from pydantic import ValidationError

from regitem.values import HtmlFinding, Text, TextError, Url, UrlError, UrlErrorReason


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("https://Example.org", "https://example.org/"),
        ("http://example.org:80/a?b=c#d", "http://example.org/a?b=c#d"),
        ("https://example.org:443", "https://example.org/"),
        ("https://example.org:8443/x", "https://example.org:8443/x"),
        ("http://user:pw@Example.org/", "http://user:pw@example.org/"),
        ("http://192.168.0.1/", "http://192.168.0.1/"),
        ("http://[::1]:8080/", "http://[::1]:8080/"),
        ("http://example.org/a/../b", "http://example.org/b"),
        ("http://m\u00fcller.de/", "http://xn--mller-kva.de/"),
        ("http://1.2.3/", "http://1.2.0.3/"),
        ("http://example.org/a b", "http://example.org/a%20b"),
    ],
)
def test_url_normalizes(raw: str, expected: str) -> None:
    assert str(Url.parse(raw)) == expected


@pytest.mark.parametrize(
    "raw,reason",
    [
        ("example.org", UrlErrorReason.RELATIVE_URL),
        ("/path/only", UrlErrorReason.RELATIVE_URL),
        ("ftp://example.org/", UrlErrorReason.PARSE_ERROR),
        ("HTTP://example.org/", UrlErrorReason.PARSE_ERROR),
        ("http://exa mple.org/", UrlErrorReason.INVALID_DOMAIN),
        ("http://256.1.1.1/", UrlErrorReason.INVALID_IPV4_ADDRESS),
        ("http://[::g]/", UrlErrorReason.INVALID_IPV6_ADDRESS),
        ("http://exa%mple.org/", UrlErrorReason.INVALID_DOMAIN),
        ("http://", UrlErrorReason.INVALID_DOMAIN),
        ("http://example.org:99999/", UrlErrorReason.INVALID_PORT),
        ("http://example.org:abc/", UrlErrorReason.INVALID_PORT),
    ],
)
def test_url_reasons(raw: str, reason: UrlErrorReason) -> None:
    with pytest.raises(UrlError) as ei:
        Url.parse(raw)
    assert ei.value.reason is reason


def test_url_model_requires_http_prefix() -> None:
    with pytest.raises(ValidationError):
        Url(value="ftp://example.org/")


@pytest.mark.parametrize(
    "raw",
    ["foo *bar*", "# Title\n\nSome `<i>` code and a [link](https://example.org).", "a < b > c", ""],
)
def test_text_keeps_source(raw: str) -> None:
    assert str(Text.parse(raw)) == raw


def test_text_reports_every_inline_tag() -> None:
    with pytest.raises(TextError) as ei:
        Text.parse("<i>oo</i>")
    assert ei.value.findings == (
        HtmlFinding(inline=True, value="<i>"),
        HtmlFinding(inline=True, value="</i>"),
    )
    assert str(ei.value) == (
        "Inline HTML is not allowed in Text. Found <i>; "
        "Inline HTML is not allowed in Text. Found </i>"
    )


def test_text_reports_html_blocks() -> None:
    with pytest.raises(TextError) as ei:
        Text.parse("intro\n\n<div>\nhello\n</div>\n\n<!-- note -->")
    findings = ei.value.findings
    assert [f.inline for f in findings] == [False, False]
    assert findings[0].value == "<div>\nhello\n</div>"
    assert str(findings[1]).startswith("HTML is not allowed in Text. Found <!--")

"""
Absolute http(s) URLs.

Parsing goes through pydantic's ``AnyUrl``, which implements the WHATWG URL
standard: dot segments are resolved, hosts are lower-cased and IDNA-encoded,
short IPv4 forms are expanded, and characters such as spaces are
percent-encoded. On top of the URL grammar the literal input must start with
``http://`` or ``https://``.

Failures carry a ``UrlErrorReason`` from a closed set so callers can tell a bad
port from a bad domain without parsing messages.

The stored (and displayed) form is the serialized URL: lower-case host,
default port dropped, empty path rendered as ``/``.

Examples:
    >>> from regitem.values.url import Url
    >>> str(Url.parse("https://Example.org"))
    'https://example.org/'
    >>> str(Url.parse("http://example.org/a/../b"))
    'http://example.org/b'
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import AnyUrl, TypeAdapter, ValidationError, field_validator

from regitem.core.kind import Kind

from .base import ValueModel

__all__ = [
    "UrlErrorReason",
    "UrlError",
    "Url",
]

ALLOWED_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://")

_URL: Final[TypeAdapter[AnyUrl]] = TypeAdapter(AnyUrl)


class UrlErrorReason(Enum):
    INVALID_PORT = "InvalidPort"
    INVALID_IPV4_ADDRESS = "InvalidIpv4Address"
    INVALID_IPV6_ADDRESS = "InvalidIpv6Address"
    INVALID_DOMAIN = "InvalidDomain"
    RELATIVE_URL = "RelativeUrl"
    OVERFLOW = "Overflow"
    PARSE_ERROR = "ParseError"


# ``url_parsing`` errors carry the parser's message in ``ctx["error"]``.
_PARSING_REASONS: Final[dict[str, UrlErrorReason]] = {
    "invalid port number": UrlErrorReason.INVALID_PORT,
    "invalid IPv4 address": UrlErrorReason.INVALID_IPV4_ADDRESS,
    "invalid IPv6 address": UrlErrorReason.INVALID_IPV6_ADDRESS,
    "empty host": UrlErrorReason.INVALID_DOMAIN,
    "invalid international domain name": UrlErrorReason.INVALID_DOMAIN,
    "invalid domain character": UrlErrorReason.INVALID_DOMAIN,
    "relative URL without a base": UrlErrorReason.RELATIVE_URL,
    "relative URL with a cannot-be-a-base base": UrlErrorReason.RELATIVE_URL,
    "URLs more than 4 GB are not supported": UrlErrorReason.OVERFLOW,
}


class UrlError(ValueError):
    """
    URL failure tagged with a closed reason.

    Attributes:
        reason (UrlErrorReason): Failure class.
    """

    def __init__(self, reason: UrlErrorReason, detail: str | None = None) -> None:
        self.reason = reason
        super().__init__(f"{reason.value}: {detail}" if detail else reason.value)


def _reason(exc: ValidationError) -> tuple[UrlErrorReason, str]:
    err = exc.errors()[0]
    if err["type"] == "url_parsing":
        message = str(err.get("ctx", {}).get("error", err["msg"]))
        return _PARSING_REASONS.get(message, UrlErrorReason.PARSE_ERROR), message
    if err["type"] == "url_too_long":
        return UrlErrorReason.OVERFLOW, err["msg"]
    return UrlErrorReason.PARSE_ERROR, err["msg"]


class Url(ValueModel):
    """
    Normalized absolute http(s) URL.

    Attributes:
        value (str): Serialized URL text.
    """

    kind = Kind.URL

    value: str

    @field_validator("value")
    @classmethod
    def _check_prefix(cls, v: str) -> str:
        if not v.startswith(ALLOWED_PREFIXES):
            raise ValueError("url must start with http:// or https://")
        return v

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, s: str) -> Url:
        """
        Parse and normalize an absolute http(s) URL.

        Raises:
            UrlError: With the reason mapped from the URL parser's error, or
                ``PARSE_ERROR`` when the literal input lacks an http(s) prefix.
        """
        try:
            url = _URL.validate_python(s)
        except ValidationError as exc:
            reason, detail = _reason(exc)
            raise UrlError(reason, detail) from exc
        if not s.startswith(ALLOWED_PREFIXES):
            raise UrlError(UrlErrorReason.PARSE_ERROR, "scheme must be http or https")
        return cls(value=str(url))

"""
SHA-256 digest helpers.

Wraps hashlib so callers deal with one algorithm tag and one hex policy
(lower-case, two characters per byte). This module is zero-IO.

Notes:
    - Text input is hashed over its UTF-8 encoding.
    - ``ALGORITHM`` is the tag used in identifiers (``sha-256:<hex>``).

Examples:
    >>> from regitem.core.digest import hexdigest
    >>> hexdigest('{"field1":"a","field2":"b"}')
    '129332749e67eb9ab7390d7da2e88173367d001ac3e9e39f06e41690cd05e3ae'
"""

from __future__ import annotations

import hashlib
from typing import Final

__all__ = [
    "ALGORITHM",
    "digest",
    "hexdigest",
]

ALGORITHM: Final[str] = "sha-256"


def digest(data: str | bytes) -> bytes:
    """
    Compute the raw SHA-256 digest of text or bytes.

    Args:
        data (str | bytes): Input; ``str`` is encoded as UTF-8 first.

    Returns:
        bytes: 32-byte digest.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).digest()


def hexdigest(data: str | bytes) -> str:
    """SHA-256 of ``data`` as 64 lower-case hex characters."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()

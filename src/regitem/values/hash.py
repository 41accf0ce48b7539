"""
Algorithm-tagged hex digests (``sha-256:<hex>``).

The digest must be lower-case hex. Upper-case hex is rejected on purpose, so
every hash has exactly one textual form.

Examples:
    >>> from regitem.values.hash import Hash
    >>> h = Hash.parse("sha-256:129332749e67eb9ab7390d7da2e88173367d001ac3e9e39f06e41690cd05e3ae")
    >>> h.algorithm.value
    'sha-256'
"""

from __future__ import annotations

from enum import Enum

from pydantic import field_validator

from regitem.core.grammar import pattern
from regitem.core.kind import Kind

from .base import ValueModel

__all__ = [
    "HashAlgorithm",
    "HashError",
    "Hash",
]


class HashAlgorithm(Enum):
    """Known digest algorithms, by identifier tag."""

    SHA_256 = "sha-256"


class HashError(ValueError):
    """Hash syntax failure."""


class Hash(ValueModel):
    kind = Kind.HASH

    algorithm: HashAlgorithm
    digest: str

    @field_validator("digest")
    @classmethod
    def _check_digest(cls, v: str) -> str:
        if not pattern("hex_digest").fullmatch(v):
            raise ValueError("digest must be lower-case hex")
        return v

    def __str__(self) -> str:
        return f"{self.algorithm.value}:{self.digest}"

    @classmethod
    def parse(cls, s: str) -> Hash:
        """
        Parse ``algorithm:digest``.

        Raises:
            HashError: If the separator is missing, the algorithm is unknown
                ("Invalid algorithm"), or the digest is not lower-case hex.
        """
        tag, sep, digest = s.partition(":")
        if not sep:
            raise HashError("Invalid hash. Expected algorithm:digest")
        try:
            algorithm = HashAlgorithm(tag)
        except ValueError as exc:
            raise HashError("Invalid algorithm") from exc
        if not pattern("hex_digest").fullmatch(digest):
            raise HashError("Invalid digest. Expected lower-case hex")
        return cls(algorithm=algorithm, digest=digest)

"""
Compact URIs (``prefix:reference``).

The prefix follows ``[a-z][a-z0-9-]+``. The reference is intentionally
permissive: it may hold ``/``, ``=``, further colons, and so on, and is only
rejected when it ends in ``:``.

Examples:
    >>> from regitem.values.curie import Curie
    >>> str(Curie.parse("country:GB"))
    'country:GB'
"""

from __future__ import annotations

from pydantic import field_validator

from regitem.core.grammar import pattern
from regitem.core.kind import Kind

from .base import ValueModel

__all__ = [
    "CurieError",
    "Curie",
]


class CurieError(ValueError):
    """CURIE syntax failure."""


class Curie(ValueModel):
    """
    Compact URI.

    Attributes:
        prefix (str): Lower-case prefix, at least two characters.
        reference (str): Everything after the first colon.
    """

    kind = Kind.CURIE

    prefix: str
    reference: str

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, v: str) -> str:
        if not pattern("curie_prefix").fullmatch(v):
            raise ValueError(f"Invalid CURIE prefix {v!r}")
        return v

    @field_validator("reference")
    @classmethod
    def _check_reference(cls, v: str) -> str:
        if v.endswith(":"):
            raise ValueError(f"Invalid CURIE reference {v!r}")
        return v

    def __str__(self) -> str:
        return f"{self.prefix}:{self.reference}"

    @classmethod
    def parse(cls, s: str) -> Curie:
        """
        Parse ``prefix:reference``.

        Raises:
            CurieError: If there is no colon, the prefix is malformed, or the
                reference ends with a colon.
        """
        prefix, sep, reference = s.partition(":")
        if not sep:
            raise CurieError("Invalid CURIE. Expected prefix:reference")
        if not pattern("curie_prefix").fullmatch(prefix):
            raise CurieError(f"Invalid CURIE prefix. Found {prefix}")
        if reference.endswith(":"):
            raise CurieError(f"Invalid CURIE reference. Found {reference}")
        return cls(prefix=prefix, reference=reference)

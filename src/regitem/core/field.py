"""
Field names for item keys.

A Fieldname is an immutable ``str`` restricted to the alphabet ``[a-z-]``.
Because it subclasses ``str``, ordering, hashing, and JSON encoding behave
exactly like the underlying text; for this alphabet codepoint order and byte
order coincide, which is what canonical key ordering relies on.

Examples:
    >>> from regitem.core.field import Fieldname
    >>> Fieldname("start-date")
    Fieldname('start-date')
    >>> sorted([Fieldname("foo"), Fieldname("bar")])
    [Fieldname('bar'), Fieldname('foo')]
"""

from __future__ import annotations

from .errors import InvalidFieldname
from .grammar import pattern

__all__ = [
    "Fieldname",
    "is_fieldname",
]


def is_fieldname(value: str) -> bool:
    """
    Check whether a string is a legal field name.

    Args:
        value (str): Candidate key.

    Returns:
        bool: True if ``value`` is non-empty and only contains ``a-z`` and ``-``.
    """
    return isinstance(value, str) and bool(pattern("fieldname").fullmatch(value))


class Fieldname(str):
    """
    Item key restricted to lower-case ASCII letters and hyphens.

    Raises:
        InvalidFieldname: If the text contains any other character, or is empty.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Fieldname:
        if isinstance(value, Fieldname):
            return value
        if not is_fieldname(value):
            raise InvalidFieldname(str(value))
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Fieldname({str.__repr__(self)})"

"""
Items: ordered mappings from field name to value.

Keys are kept in Fieldname order at insertion time (bisect into a sorted key
list), so iteration, serialization, and hashing all see the same order without
a separate sort step.

An Item is built empty, populated with ``insert``, then shared. Hashing is a
pure function of content, so an Item must not be mutated once its hash or id
has been handed out.

Examples:
    >>> from regitem.core.item import Item
    >>> from regitem.core.value import Untyped
    >>> item = Item()
    >>> item.insert("foo", Untyped("abc"))
    >>> item.insert("bar", Untyped("xyz"))
    >>> list(item)
    [Fieldname('bar'), Fieldname('foo')]
    >>> item.hash()
    '5dd4fe3b0de91882dae86b223ca531b5c8f2335d9ee3fd0ab18dfdc2871d0c61'
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Mapping

from .field import Fieldname
from .value import VALUE_TYPES, Value

__all__ = [
    "Item",
]


class Item(Mapping[Fieldname, Value]):
    """
    Ordered Fieldname -> Value mapping with unique keys.

    Args:
        fields (Mapping[str, Value] | Iterable[tuple[str, Value]] | None):
            Optional initial content, inserted pair by pair.

    Raises:
        InvalidFieldname: If a key is not a legal field name.
        TypeError: If a value is not a Value variant.
    """

    __slots__ = ("_keys", "_values")

    def __init__(
        self, fields: Mapping[str, Value] | Iterable[tuple[str, Value]] | None = None
    ) -> None:
        self._keys: list[Fieldname] = []
        self._values: dict[Fieldname, Value] = {}
        if fields is None:
            return
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        for key, value in pairs:
            self.insert(key, value)

    def insert(self, key: str, value: Value) -> None:
        """
        Set ``key`` to ``value``, replacing any previous value for that key.

        Raises:
            InvalidFieldname: If ``key`` is not a legal field name.
            TypeError: If ``value`` is not a Value variant.
        """
        name = Fieldname(key)
        if not isinstance(value, VALUE_TYPES):
            raise TypeError(f"item values must be Value variants, got {type(value).__name__}")
        if name not in self._values:
            bisect.insort(self._keys, name)
        self._values[name] = value

    def __getitem__(self, key: str) -> Value:
        return self._values[key]

    def __iter__(self) -> Iterator[Fieldname]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{str(k)!r}: {v!r}" for k, v in self.items())
        return f"Item({{{body}}})"

    def to_json(self) -> str:
        """Canonical JSON text of this item."""
        from .codec import to_json

        return to_json(self)

    def hash(self) -> str:
        """SHA-256 hex digest of the canonical JSON."""
        from .hashing import item_hash

        return item_hash(self)

    def id(self) -> str:
        """Content identifier, ``sha-256:<hash>``."""
        from .hashing import item_id

        return item_id(self)

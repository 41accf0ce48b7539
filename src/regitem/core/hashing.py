"""
Content addressing for items.

An item's hash is the SHA-256 of the UTF-8 bytes of its canonical JSON; its id
is that hash prefixed with the algorithm tag. Equal content always yields the
same hash, whatever the formatting of the input it was decoded from.

Notes:
    - ``canonical_hash`` additionally certifies that raw input was already
      canonical: canonicalization is deterministic and idempotent on canonical
      input, so the raw digest equals the item hash exactly when the raw bytes
      are their own canonical form.
    - Decoding errors surface before any comparison is attempted.

Examples:
    >>> from regitem.core.hashing import canonical_hash
    >>> canonical_hash('{"bar":"xyz","foo":"abc"}')
    '5dd4fe3b0de91882dae86b223ca531b5c8f2335d9ee3fd0ab18dfdc2871d0c61'
"""

from __future__ import annotations

import logging

from .codec import from_json, to_json
from .digest import ALGORITHM, hexdigest
from .errors import NotCanonicalError
from .item import Item

__all__ = [
    "item_hash",
    "item_id",
    "is_canonical",
    "canonical_hash",
]

logger = logging.getLogger(__name__)


def item_hash(item: Item) -> str:
    """
    Compute the content hash of an item.

    Args:
        item (Item): Item to hash.

    Returns:
        str: SHA-256 hex digest (64 lower-case chars) of ``to_json(item)``.
    """
    return hexdigest(to_json(item))


def item_id(item: Item) -> str:
    """Content identifier ``sha-256:<item_hash>``."""
    return f"{ALGORITHM}:{item_hash(item)}"


def is_canonical(raw: str | bytes) -> bool:
    """
    Check whether raw JSON is byte-identical to its canonical form.

    Raises:
        CodecError, FieldError: If ``raw`` does not decode into an Item.
    """
    item = from_json(raw)
    return hexdigest(raw) == item_hash(item)


def canonical_hash(raw: str | bytes, force: bool = False) -> str:
    """
    Hash raw item JSON, requiring it to be canonical unless ``force`` is set.

    Args:
        raw (str | bytes): Item JSON as received.
        force (bool): Hash the canonical form even if ``raw`` is not canonical.

    Returns:
        str: Item hash.

    Raises:
        CodecError, FieldError: If ``raw`` does not decode into an Item.
        NotCanonicalError: If ``raw`` differs from its canonical form and
            ``force`` is False.
    """
    item = from_json(raw)
    digest = item_hash(item)
    if force:
        return digest
    raw_digest = hexdigest(raw)
    if raw_digest != digest:
        logger.debug("raw digest %s differs from canonical digest %s", raw_digest, digest)
        raise NotCanonicalError()
    return digest

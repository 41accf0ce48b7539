"""
regitem: validation, canonicalization, and content addressing for register items.

## Responsibilities
- Parse raw strings against a fixed catalogue of datatypes (dates, periods,
  geometries, URLs, hashes, CURIEs, markdown text, ...).
- Serialize items to a unique canonical JSON text and derive a stable
  ``sha-256:<hex>`` identifier from it.

## Public API
- Item, Fieldname, Kind, ListKind
- parse: kind-directed value parsing
- to_json / from_json: canonical codec
- canonical_hash: hash raw JSON, certifying it was canonical

## Import DAG discipline
- regitem.values depends on regitem.core.{grammar,kind} only.
- regitem.core.value dispatches to regitem.values.
- regitem.cli and regitem.config sit on top and are never imported by the core.
"""

from __future__ import annotations

from regitem.core.codec import from_json, to_json
from regitem.core.field import Fieldname
from regitem.core.hashing import canonical_hash, item_hash, item_id
from regitem.core.item import Item
from regitem.core.kind import Kind, ListKind
from regitem.core.value import Value, parse

__all__ = [
    "Fieldname",
    "Item",
    "Kind",
    "ListKind",
    "Value",
    "canonical_hash",
    "from_json",
    "item_hash",
    "item_id",
    "parse",
    "to_json",
]

__version__ = "0.1.0"

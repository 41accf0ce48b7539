"""
Shared base for value models.

Every value variant is an immutable pydantic model. Subclasses declare their
``kind`` and implement ``__str__`` (the canonical display string);
``to_json_value`` defaults to that display string, which is how every rich
datatype is carried on the wire.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from regitem.core.kind import Kind

__all__ = [
    "ValueModel",
    "reject_surrogates",
]


class ValueModel(BaseModel):
    """Frozen, closed-shape base for all value variants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[Kind | None] = None

    def to_json_value(self) -> Any:
        """Return the JSON-native encoding of this value."""
        return str(self)


def reject_surrogates(value: str) -> str:
    """
    Refuse text holding lone UTF-16 surrogates (not encodable as UTF-8).

    Raises:
        ValueError: If any codepoint lies in U+D800..U+DFFF.
    """
    if any("\ud800" <= ch <= "\udfff" for ch in value):
        raise ValueError("text must not contain lone surrogate code points")
    return value

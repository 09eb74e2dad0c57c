"""Data models for the store module."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

__all__ = ["FieldValue", "RawRecord", "Record"]

# A decoded field: one scalar, or the elements of an array field.
FieldValue = Union[str, int, float, list]


@dataclass
class RawRecord:
    """
    A record as enumerated from a database, before resolution.

    Fields
    ──────
    name     — store-relative name the identifier is derived from
    kind     — record class, e.g. "LootRandomizer" ("" when the record has none)
    payload  — backend-specific content, opaque outside the backend
    """
    name:    str
    kind:    str = ""
    payload: Any = None


@dataclass
class Record:
    """A fully resolved record: identifier, class and ordered field mapping."""
    id:   str
    kind: str = ""
    data: dict[str, FieldValue] = field(default_factory=dict)

    def get_string(self, key: str) -> Optional[str]:
        """Return field *key* if it holds a string value, else None."""
        value = self.data.get(key)
        return value if isinstance(value, str) else None

    def __str__(self) -> str:
        lines = [self.id]
        lines.extend(f"  {key} = {_format_value(value)}" for key, value in self.data.items())
        return "".join(f"{line}\n" for line in lines)


def _format_value(value: FieldValue) -> str:
    if isinstance(value, list):
        return ";".join(str(v) for v in value)
    return str(value)

"""Items that can be carried, and save points that can be unlocked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass
class Item:
    """A named object with a description."""

    name: str = ""
    description: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Item":
        """Build an item from its JSON object; missing values become empty."""
        return cls(name=_text(data, "name"), description=_text(data, "description"))

    def to_json(self) -> dict[str, str]:
        """Return the JSON object for this item."""
        return {"name": self.name, "description": self.description}


@dataclass
class SavePoint:
    """A named save point located on a field."""

    field_id: str = ""
    name: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SavePoint":
        """Build a save point from its JSON object."""
        return cls(field_id=_text(data, "fieldId"), name=_text(data, "name"))

    def to_json(self) -> dict[str, str]:
        """Return the JSON object for this save point."""
        return {"name": self.name, "fieldId": self.field_id}
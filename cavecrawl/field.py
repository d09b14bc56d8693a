"""A single field of a level: its exits, description, items and save point."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any, Mapping

from .item import Item, SavePoint, _text

# Exit markers: "x" means no passage, "b" means a blocked passage.
CLOSED_EXITS = frozenset({"x", "b"})


@dataclass
class Field:
    """One location of the map."""

    id: str = ""
    right: str = ""
    left: str = ""
    up: str = ""
    down: str = ""
    description: str = ""
    items: list[Item] = dc_field(default_factory=list)
    discovered: str = ""
    save_point: SavePoint = dc_field(default_factory=SavePoint)
    has_save_point: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Field":
        """Build a field from its JSON object."""
        result = cls(
            id=_text(data, "id"),
            right=_text(data, "right"),
            left=_text(data, "left"),
            up=_text(data, "up"),
            down=_text(data, "down"),
            description=_text(data, "description"),
            discovered=_text(data, "discovered"),
        )
        if data.get("savePoint") is not None:
            result.has_save_point = True
            result.save_point = SavePoint(field_id=result.id, name=_text(data, "savePoint"))
        items = data.get("items")
        if isinstance(items, list):
            result.items = [Item.from_json(entry) for entry in items if isinstance(entry, Mapping)]
        return result

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this field."""
        return {
            "id": self.id,
            "up": self.up,
            "down": self.down,
            "left": self.left,
            "right": self.right,
            "description": self.description,
            "savePoint": self.save_point.name if self.has_save_point else None,
            "discovered": self.discovered,
            "items": [item.to_json() for item in self.items],
        }

    def has_item(self, item_name: str) -> bool:
        """Whether an item with this name lies on the field."""
        return any(item.name == item_name for item in self.items)

    def icon_name(self, with_player: bool = False) -> str:
        """Name of the map image showing the field's open exits."""
        exits = (("n", self.up), ("e", self.right), ("s", self.down), ("w", self.left))
        letters = "".join(letter for letter, target in exits if target not in CLOSED_EXITS)
        prefix = "p_" if with_player else ""
        return f"{prefix}{letters}.png"
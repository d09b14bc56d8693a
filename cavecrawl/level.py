"""A level: the set of fields and the events bound to them."""

from __future__ import annotations

from typing import Any, Mapping

from .field import Field
from .signals import Signal


class Level:
    """Holds the fields of the map and reports events through signals."""

    def __init__(self) -> None:
        self.fields: list[Field] = []
        self.issue_console_output = Signal()
        self.player_dies = Signal()

    def read(self, data: Mapping[str, Any]) -> None:
        """Replace all fields with those in the JSON object."""
        entries = data.get("fields")
        if not isinstance(entries, list):
            entries = []
        self.fields = [Field.from_json(entry) for entry in entries if isinstance(entry, Mapping)]

    def write(self) -> dict[str, Any]:
        """Return the JSON object describing all fields."""
        return {"fields": [field.to_json() for field in self.fields]}

    def get_field(self, field_id: str) -> Field:
        """Return the field with this id; raise KeyError if there is none."""
        for field in self.fields:
            if field.id == field_id:
                return field
        raise KeyError(field_id)

    def execute_field_event(self, field_id: str) -> None:
        """Trigger whatever happens on entering the given field."""
        if field_id == "3":
            self.issue_console_output.emit(
                "Oh no!\n   The door closed behind us.\n   We have to find an alternative path now."
            )
        if field_id == "6":
            self.player_dies.emit()
        if field_id == "13":
            self.issue_console_output.emit("Thank you for playing our Demo.")

    def use_item(self, current_field: Field, item_name: str) -> str:
        """Apply an item on a field and describe the outcome."""
        if current_field.id == "2" and item_name == "Swipey thing":
            current_field.up = self.get_field("3").id
            return "Sucessfully opened the door"
        return "I can't use this item here"
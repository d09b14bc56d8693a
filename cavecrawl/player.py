"""The player: position on the level, inventory and unlocked save points."""

from __future__ import annotations

from typing import Any, Mapping

from .field import Field
from .inventory import Inventory
from .item import Item, SavePoint, _text
from .level import Level
from .signals import Signal

DEFAULT_SAVE_POINT = "The entry of the caves"
_SPACER = " " * 5
_DIRECTIONS = ("up", "down", "left", "right")
_OPPOSITE = {"up": "down", "down": "up", "left": "right", "right": "left"}

# item name -> (field it works on, direction it opens, field it leads to, message)
_UNLOCKS: dict[str, tuple[str, str, str, str]] = {
    "key_A": ("2", "right", "5", "You have sucessfully unlocked the way into direction: right"),
    "key_B": ("10", "right", "13", "You have sucessfully unlocked the way into direction: right"),
    "passcode_A": ("5", "right", "7", "You have sucessfully unlocked the way into direction: right"),
    "passcode_B": ("10", "down", "14", "You have sucessfully unlocked the way into direction: down"),
    "pickaxe": (
        "4",
        "up",
        "1",
        "The wall broke. You have sucessfully unlocked the way into direction: up",
    ),
}

_KEY_SEGMENTS = frozenset({"key_segment_A", "key_segment_B"})


def _bullet_list(header: str, names: list[str]) -> str:
    return header + "\n".join(f"{_SPACER}• {name}" for name in names)


class Player:
    """A player moving over the fields of a level."""

    def __init__(self, level: Level) -> None:
        self.level = level
        self.name = ""
        self.current_field: Field | None = None
        self.unlocked_save_points: list[SavePoint] = []
        self.inventory = Inventory()
        self.last_field_id = ""
        self.last_save_point = DEFAULT_SAVE_POINT
        self.issue_console_output = Signal()
        self.moved = Signal()
        self.picked_up_items = Signal()
        self.dropped_items = Signal()

    def _say(self, text: str) -> str:
        self.issue_console_output.emit(text)
        return text

    @property
    def _field(self) -> Field:
        if self.current_field is None:
            raise RuntimeError("the player has not been placed on a field")
        return self.current_field

    def read(self, data: Mapping[str, Any]) -> None:
        """Load name, inventory, save points and position from a JSON object."""
        self.name = _text(data, "name")
        entries = data.get("inventory")
        self.inventory.collected_items = [
            Item.from_json(entry)
            for entry in (entries if isinstance(entries, list) else [])
            if isinstance(entry, Mapping)
        ]
        points = data.get("unlockedSavePoints")
        self.unlocked_save_points.extend(
            SavePoint.from_json(entry)
            for entry in (points if isinstance(points, list) else [])
            if isinstance(entry, Mapping)
        )
        self.current_field = self.level.get_field(_text(data, "currentFieldId"))

    def write(self) -> dict[str, Any]:
        """Return the JSON object describing the player."""
        return {
            "name": self.name,
            "currentFieldId": self._field.id,
            "inventory": [item.to_json() for item in self.inventory],
            "unlockedSavePoints": [point.to_json() for point in self.unlocked_save_points],
        }

    def has_item(self, item_name: str) -> bool:
        """Whether the inventory holds an item with this name."""
        return self.inventory.has_item(item_name)

    def move(self, direction: str) -> None:
        """Move one field up, down, left or right, if the way is open."""
        if direction not in _DIRECTIONS:
            return
        target = getattr(self._field, direction)
        if target == "x":
            self._say("It is impossible to move into this direction.")
            return
        if target == "b":
            self._say("This direction is blocked.\n   There might be some way to free this way.")
            return
        self.last_field_id = self._field.id
        self.current_field = self.level.get_field(target)
        self.current_field.discovered = "1"
        self._say(f"Moved {direction} to field with id: {self.current_field.id}")
        self.level.execute_field_event(self.current_field.id)
        self.moved.emit(self.current_field, self.last_field_id)
        self.describe_field()

    def die(self) -> None:
        """Respawn at the last save point."""
        self._say("You fell victim to a deadly trap.\n   You will respawn at your last save-point")
        self.fast_travel(self.last_save_point)

    @staticmethod
    def _check_amount(number_of_items: int) -> None:
        if number_of_items < 1:
            raise ValueError(f"amount must be positive, got {number_of_items}")

    @staticmethod
    def _take(source: list[Item], item_type: str, limit: int | None) -> list[Item]:
        """Remove up to ``limit`` items named ``item_type`` from ``source``, in order."""
        taken: list[Item] = []
        kept: list[Item] = []
        for item in source:
            if item.name == item_type and (limit is None or len(taken) < limit):
                taken.append(item)
            else:
                kept.append(item)
        source[:] = kept
        return taken

    def _not_on_field(self, item_type: str) -> str:
        return self._say(f'I can\'t find "{item_type}" on this field')

    def pick_up_item_of_type(self, item_type: str) -> str:
        """Pick up one item of this type from the current field."""
        taken = self._take(self._field.items, item_type, 1)
        if not taken:
            return self._not_on_field(item_type)
        self.inventory.collected_items.extend(taken)
        message = self._say(f"Picked up {item_type}")
        self.picked_up_items.emit(item_type, self.inventory)
        self.print_item_description(item_type)
        return message

    def pick_up_multiple_items_of_type(self, item_type: str, number_of_items: int) -> str:
        """Pick up a given number of items of this type from the current field."""
        self._check_amount(number_of_items)
        taken = self._take(self._field.items, item_type, number_of_items)
        if not taken:
            return self._not_on_field(item_type)
        self.inventory.collected_items.extend(taken)
        if len(taken) == number_of_items:
            message = self._say(f"Picked up {number_of_items} {item_type}")
        else:
            message = self._say(
                "The field doesn't contain as many items as you requested. I only found: "
                f"{len(taken)} {item_type}s"
            )
        self.picked_up_items.emit(item_type, self.inventory)
        self.print_item_description(item_type)
        return message

    def pick_up_all_items_of_type(self, item_type: str) -> str:
        """Pick up every item of this type from the current field."""
        taken = self._take(self._field.items, item_type, None)
        if not taken:
            return self._not_on_field(item_type)
        self.inventory.collected_items.extend(taken)
        self._say(f"Picked all available {item_type}")
        self.picked_up_items.emit(item_type, self.inventory)
        self.print_item_description(item_type)
        return "Picked up item"

    def _dropped(self, item_type: str) -> str:
        message = self._say("Dropped item")
        self.dropped_items.emit(item_type, self.inventory)
        return message

    def drop_item_of_type(self, item_type: str) -> str:
        """Drop one item of this type onto the current field."""
        taken = self._take(self.inventory.collected_items, item_type, 1)
        if not taken:
            return self._say("Item not found in inventory")
        self._field.items.extend(taken)
        return self._dropped(item_type)

    def drop_multiple_items_of_type(self, item_type: str, number_of_items: int) -> str:
        """Drop a given number of items of this type onto the current field."""
        self._check_amount(number_of_items)
        taken = self._take(self.inventory.collected_items, item_type, number_of_items)
        self._field.items.extend(taken)
        if len(taken) == number_of_items:
            return self._dropped(item_type)
        if taken:
            self.dropped_items.emit(item_type, self.inventory)
        return self._say("Not enough items were available")

    def drop_all_items_of_type(self, item_type: str) -> str:
        """Drop every item of this type onto the current field."""
        taken = self._take(self.inventory.collected_items, item_type, None)
        if not taken:
            return self._say("ItemType is not available in inventory")
        self._field.items.extend(taken)
        return self._dropped(item_type)

    def list_available_items_on_field(self) -> str:
        """Report the items lying on the current field."""
        items = self._field.items
        if not items:
            return self._say("There are no items on this field")
        return self._say(_bullet_list("Found following items:\n", [item.name for item in items]))

    def list_inventory(self) -> str:
        """Report the carried items."""
        if not len(self.inventory):
            return self._say("Inventory is empty\n")
        return self._say(_bullet_list("Inventory:\n", [item.name for item in self.inventory]))

    def describe_field(self) -> str:
        """Report the description of the current field."""
        return self._say("Field Description: \n" + self._field.description)

    def set_save_point(self) -> None:
        """Unlock the save point of the current field, if it has one."""
        field = self._field
        if not field.has_save_point:
            self._say("The current field is not eligable to set a savepoint here")
            return
        if any(point.name == field.save_point.name for point in self.unlocked_save_points):
            self._say("Savepoint is already set on this field")
            return
        self.unlocked_save_points.append(field.save_point)
        self._say("Savepoint successfully set")
        self.last_save_point = field.save_point.name

    def list_available_save_points(self) -> str:
        """Report the unlocked save points."""
        if not self.unlocked_save_points:
            return self._say("You have no checkpoints unlocked yet")
        names = [point.name for point in self.unlocked_save_points]
        return self._say(_bullet_list("Unlocked savepoints: \n", names))

    def _travel_to(self, point: SavePoint) -> None:
        self.current_field = self.level.get_field(point.field_id)
        self.last_save_point = point.name
        self._say(f"Successfully fast-traveled to field: {point.name}")

    def fast_travel(self, destination: str) -> None:
        """Jump to an unlocked save point given by field id or by name."""
        for point in self.unlocked_save_points:
            if point.field_id == destination:
                self._travel_to(point)
                return
        for point in self.unlocked_save_points:
            if point.name == destination:
                self._travel_to(point)

    def combine_items(self, items: str) -> None:
        """Combine two inventory items given as 'first second'."""
        parts = items.split(" ")
        if len(parts) != 2:
            self._say("Please specify TWO items")
            return
        first, second = parts
        has_first = self.inventory.has_item(first)
        has_second = self.inventory.has_item(second)
        if not has_first and not has_second:
            self._say(f"I can't find: {first} and {second} in the Inventory")
            return
        if not has_first:
            self._say(f"I can't find: {first} in the Inventory")
            return
        if not has_second:
            self._say(f"I can't find: {second} in the Inventory")
            return
        if first != second and {first, second} == _KEY_SEGMENTS:
            self._say("Combined items: 'key_segment_B' and 'key_segment_A' to 'key_B'")
            self.inventory.delete_one(first)
            self.inventory.delete_one(second)
            self.inventory.insert_one(
                Item(
                    name="key_B",
                    description="The key used to be sawed in half. I'm glad that I could reassemble it.",
                )
            )
        else:
            self._say("I can't combine these two items")

    def use_item(self, item_name: str) -> None:
        """Use an inventory item on the current field."""
        if len(item_name.split(" ")) > 1:
            self._say("I can only use one item at a time")
            return
        if not self.inventory.has_item(item_name):
            self._say(f"The item: {item_name} cannot be found in the inventory")
            return
        unlock = _UNLOCKS.get(item_name)
        if unlock is not None:
            field_id, direction, target_id, message = unlock
            if self._field.id == field_id:
                setattr(self._field, direction, target_id)
                setattr(self.level.get_field(target_id), _OPPOSITE[direction], field_id)
                self._say(message)
                return
        self._say("I'm sorry this items seems to have no effect on this field.")

    def print_item_description(self, item_name: str) -> None:
        """Report the description of a carried item."""
        if not self.inventory.has_item(item_name):
            self._say("Item cannot be found in Inventory")
            return
        self._say("Description: " + self.inventory.get_item(item_name).description)
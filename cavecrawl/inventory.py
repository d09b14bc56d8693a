"""The collection of items a player carries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .item import Item


@dataclass
class Inventory:
    """An ordered list of collected items; duplicates are allowed."""

    collected_items: list[Item] = field(default_factory=list)

    def insert_one(self, item: Item) -> None:
        """Add one item at the end."""
        self.collected_items.append(item)

    def delete_one(self, item_name: str) -> None:
        """Remove the first item with this name, if any."""
        for index, item in enumerate(self.collected_items):
            if item.name == item_name:
                del self.collected_items[index]
                return

    def has_item(self, item_name: str) -> bool:
        """Whether an item with this name is carried."""
        return any(item.name == item_name for item in self.collected_items)

    def get_item(self, item_name: str) -> Item:
        """Return the first item with this name; raise KeyError if absent."""
        for item in self.collected_items:
            if item.name == item_name:
                return item
        raise KeyError(item_name)

    def get_item_description(self, item_name: str) -> str:
        """Return the description of the first item with this name."""
        return self.get_item(item_name).description

    def get_item_amount(self, item_name: str) -> int:
        """Count the items with this name."""
        return sum(1 for item in self.collected_items if item.name == item_name)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.collected_items)

    def __len__(self) -> int:
        return len(self.collected_items)
import pytest

from cavecrawl.inventory import Inventory
from cavecrawl.item import Item


def _filled():
    inventory = Inventory()
    inventory.insert_one(Item("rock", "first"))
    inventory.insert_one(Item("key_A", "opens a door"))
    inventory.insert_one(Item("rock", "second"))
    return inventory


def test_amount_counts_duplicates():
    inventory = _filled()
    assert inventory.get_item_amount("rock") == 2
    assert inventory.get_item_amount("key_A") == 1
    assert inventory.get_item_amount("missing") == 0


def test_delete_one_removes_only_first_match():
    inventory = _filled()
    inventory.delete_one("rock")
    assert inventory.get_item_amount("rock") == 1
    assert inventory.get_item("rock").description == "second"
    assert len(inventory) == 2


def test_delete_missing_leaves_inventory_unchanged():
    inventory = _filled()
    inventory.delete_one("missing")
    assert len(inventory) == 3


def test_has_item():
    inventory = _filled()
    assert inventory.has_item("key_A")
    assert not inventory.has_item("key_B")


def test_get_item_returns_first():
    inventory = _filled()
    assert inventory.get_item("rock") == Item("rock", "first")


def test_get_item_description():
    inventory = _filled()
    assert inventory.get_item_description("key_A") == "opens a door"


def test_get_missing_item_raises():
    with pytest.raises(KeyError):
        Inventory().get_item("key_B")
    with pytest.raises(KeyError):
        Inventory().get_item_description("key_B")


def test_insert_keeps_order():
    inventory = _filled()
    assert [item.name for item in inventory] == ["rock", "key_A", "rock"]
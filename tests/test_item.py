from cavecrawl.item import Item, SavePoint


def test_item_round_trip():
    item = Item(name="pickaxe", description="Heavy and sharp")
    assert Item.from_json(item.to_json()) == item


def test_item_to_json_keys():
    data = Item(name="key_A", description="d").to_json()
    assert data == {"name": "key_A", "description": "d"}


def test_item_from_json_missing_and_non_string_values():
    item = Item.from_json({"name": 5})
    assert item.name == ""
    assert item.description == ""


def test_savepoint_round_trip():
    point = SavePoint(field_id="4", name="The entry of the caves")
    assert SavePoint.from_json(point.to_json()) == point


def test_savepoint_uses_field_id_key():
    point = SavePoint.from_json({"name": "camp", "fieldId": "9"})
    assert point.field_id == "9"
    assert point.to_json() == {"name": "camp", "fieldId": "9"}
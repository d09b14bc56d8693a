import pytest

from cavecrawl.level import Level


def _data():
    return {
        "fields": [
            {"id": "2", "up": "b", "down": "x", "left": "x", "right": "x",
             "description": "door", "discovered": "1", "savePoint": None, "items": []},
            {"id": "3", "up": "x", "down": "2", "left": "x", "right": "x",
             "description": "hall", "discovered": "", "savePoint": None,
             "items": [{"name": "rock", "description": "grey"}]},
        ]
    }


def _level():
    level = Level()
    level.read(_data())
    return level


def test_read_and_get_field():
    level = _level()
    assert level.get_field("3").description == "hall"
    assert level.get_field("3").items[0].name == "rock"


def test_get_missing_field_raises():
    with pytest.raises(KeyError):
        _level().get_field("99")


def test_write_read_round_trip():
    level = _level()
    other = Level()
    other.read(level.write())
    assert other.fields == level.fields


def test_read_replaces_previous_fields():
    level = _level()
    level.read({"fields": []})
    assert level.fields == []


def test_use_swipey_thing_on_field_two_opens_door():
    level = _level()
    field = level.get_field("2")
    assert level.use_item(field, "Swipey thing") == "Sucessfully opened the door"
    assert field.up == "3"


def test_use_wrong_item_or_field():
    level = _level()
    assert level.use_item(level.get_field("2"), "rock") == "I can't use this item here"
    assert level.use_item(level.get_field("3"), "Swipey thing") == "I can't use this item here"
    assert level.get_field("2").up == "b"


def test_field_events():
    level = _level()
    output, deaths = [], []
    level.issue_console_output.connect(output.append)
    level.player_dies.connect(lambda: deaths.append(True))
    level.execute_field_event("3")
    level.execute_field_event("6")
    level.execute_field_event("13")
    level.execute_field_event("1")
    assert output == [
        "Oh no!\n   The door closed behind us.\n   We have to find an alternative path now.",
        "Thank you for playing our Demo.",
    ]
    assert deaths == [True]
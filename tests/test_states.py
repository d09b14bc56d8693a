import pytest

from cavecrawl.states import (
    CombineItemsState,
    DropState,
    FastTravelState,
    IdleState,
    InitialLoadGameState,
    LoadGameState,
    NewGameState,
    PickUpState,
    SaveGameState,
    State,
    States,
    UseItemState,
)

UNKNOWN = "I'm sorry i can't find a function for your command"
SEPARATOR = "---------------------------------------------------"


def record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_base_state_does_nothing():
    state = State()
    output = record(state.issue_console_output)
    changes = record(state.change_state_request)
    state.execute_command("w")
    state.print_menu()
    assert output == [] and changes == []


@pytest.mark.parametrize(
    "command, direction",
    [("w", "up"), ("s", "down"), ("a", "left"), ("d", "right")],
)
def test_idle_moves(command, direction):
    state = IdleState()
    moves = record(state.move_request)
    state.execute_command(command)
    assert moves == [(direction,)]


@pytest.mark.parametrize(
    "command, target",
    [
        ("p", "pickUpState"),
        ("r", "dropState"),
        ("sg", "saveGameState"),
        ("f", "fastTravelState"),
        ("c", "combineItemsState"),
        ("u", "useItemState"),
        ("lg", "loadGameState"),
    ],
)
def test_idle_transitions(command, target):
    state = IdleState()
    changes = record(state.change_state_request)
    state.execute_command(command)
    assert changes == [(target,)]


def test_idle_description_and_savepoint():
    state = IdleState()
    descriptions = record(state.description_request)
    savepoints = record(state.set_save_point_request)
    state.execute_command("l")
    state.execute_command("sp")
    assert descriptions == [()]
    assert savepoints == [()]


def test_idle_unknown_command():
    state = IdleState()
    output = record(state.issue_console_output)
    state.execute_command("jump")
    assert output == [(UNKNOWN,)]


def test_idle_menu():
    state = IdleState()
    output = record(state.issue_console_output)
    state.print_menu()
    assert output[0] == (SEPARATOR,)
    menu = output[1][0]
    assert menu.startswith("Please select an option: \n")
    assert menu.endswith("     lg: Load Game")
    assert len(menu.split("\n")) == 8


def test_pick_up_one():
    state = PickUpState()
    one = record(state.pick_up_one_request)
    changes = record(state.change_state_request)
    state.execute_command("rope")
    assert one == [("rope",)]
    assert changes == [("idleState",)]


def test_pick_up_all_and_many():
    state = PickUpState()
    every = record(state.pick_up_all_request)
    many = record(state.pick_up_many_request)
    state.execute_command("rope all")
    state.execute_command("rope 3")
    assert every == [("rope",)]
    assert many == [("rope", 3)]


@pytest.mark.parametrize("command", ["rope lots", "rope 1 2", "rope 99999999999"])
def test_pick_up_invalid(command):
    state = PickUpState()
    output = record(state.issue_console_output)
    changes = record(state.change_state_request)
    state.execute_command(command)
    assert output == [(UNKNOWN,)]
    assert changes == [("idleState",)]


def test_pick_up_back():
    state = PickUpState()
    one = record(state.pick_up_one_request)
    changes = record(state.change_state_request)
    state.execute_command("b")
    assert one == []
    assert changes == [("idleState",)]


def test_pick_up_menu_order():
    state = PickUpState()
    events = []
    state.issue_console_output.connect(lambda text: events.append(text))
    state.list_available_items_request.connect(lambda: events.append("LIST"))
    state.print_menu()
    assert events[:3] == [SEPARATOR, "LIST", "b: Return into main-menu"]


def test_drop_variants():
    state = DropState()
    one = record(state.drop_one_request)
    many = record(state.drop_many_request)
    every = record(state.drop_all_request)
    changes = record(state.change_state_request)
    state.execute_command("pickaxe")
    state.execute_command("pickaxe 2")
    state.execute_command("pickaxe all")
    assert one == [("pickaxe",)]
    assert many == [("pickaxe", 2)]
    assert every == [("pickaxe",)]
    assert changes == [("idleState",)] * 3


def test_drop_invalid_amount():
    state = DropState()
    output = record(state.issue_console_output)
    state.execute_command("pickaxe two")
    assert output == [(UNKNOWN,)]


def test_drop_menu_lists_inventory():
    state = DropState()
    listing = record(state.list_inventory_request)
    output = record(state.issue_console_output)
    state.print_menu()
    assert listing == [()]
    assert output[-1] == ("b: Return into main-menu",)


@pytest.mark.parametrize(
    "cls, request_name",
    [
        (FastTravelState, "fast_travel_request"),
        (CombineItemsState, "combine_items_request"),
        (UseItemState, "use_item_request"),
    ],
)
def test_forwarding_states(cls, request_name):
    state = cls()
    requests = record(getattr(state, request_name))
    changes = record(state.change_state_request)
    state.execute_command("key_A")
    state.execute_command("b")
    assert requests == [("key_A",)]
    assert changes == [("idleState",), ("idleState",)]


def test_fast_travel_menu():
    state = FastTravelState()
    listing = record(state.list_save_points_request)
    output = record(state.issue_console_output)
    state.print_menu()
    assert listing == [()]
    assert output[-1] == ("Enter the desired save-point:",)


def test_save_game_state():
    state = SaveGameState()
    saves = record(state.save_game_request)
    changes = record(state.change_state_request)
    state.execute_command("y")
    state.execute_command("b")
    assert saves == [()]
    assert changes == [("idleState",), ("idleState",)]


def test_load_game_state():
    state = LoadGameState()
    loads = record(state.load_game_request)
    output = record(state.issue_console_output)
    state.execute_command("2")
    state.execute_command("two")
    state.execute_command("b")
    assert loads == [(2,)]
    assert output == [("Please enter a valid number",)]


def test_load_game_menu():
    state = LoadGameState()
    listing = record(state.list_savepoints_request)
    output = record(state.issue_console_output)
    state.print_menu()
    assert listing == [()]
    assert output[-1] == ("b: Return to main-menu",)


def test_initial_load_rejects_back():
    state = InitialLoadGameState()
    loads = record(state.load_game_request)
    output = record(state.issue_console_output)
    state.execute_command("b")
    state.execute_command("0")
    assert loads == [(0,)]
    assert output == [("Please enter a valid number",)]


def test_new_game_state():
    state = NewGameState()
    names = record(state.new_game_request)
    output = record(state.issue_console_output)
    state.execute_command("Ada")
    state.execute_command("")
    assert names == [("Ada",)]
    assert output == [("Please enter a name",)]


def test_states_lookup():
    states = States()
    assert states.get("idleState") is states.idle_state
    assert states.get("initialLoadGameState") is states.initial_load_game_state
    assert "newGameState" in states
    assert len(list(states)) == 10


def test_states_unknown_name():
    with pytest.raises(KeyError):
        States().get("flyState")
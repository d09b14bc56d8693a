"""Menu states: each one interprets a console command and prints its menu."""

from __future__ import annotations

import re
from typing import ClassVar, Iterator

from .signals import Signal

SEPARATOR = "---------------------------------------------------"
UNKNOWN_COMMAND = "I'm sorry i can't find a function for your command"
BACK_COMMAND = "b"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int | None:
    """Parse a 32-bit decimal integer, tolerating surrounding whitespace."""
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        return None
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class State:
    """Base state: ignores commands and prints nothing."""

    _signal_names: ClassVar[tuple[str, ...]] = ("change_state_request", "issue_console_output")

    def __init__(self) -> None:
        for name in self._signal_names:
            setattr(self, name, Signal())

    def execute_command(self, command: str) -> None:
        """Interpret one console command."""

    def print_menu(self) -> None:
        """Print the menu shown while this state is active."""


class IdleState(State):
    """The main menu."""

    _signal_names = State._signal_names + (
        "move_request",
        "description_request",
        "save_game_request",
        "set_save_point_request",
    )

    _moves: ClassVar[dict[str, str]] = {"w": "up", "s": "down", "a": "left", "d": "right"}
    _transitions: ClassVar[dict[str, str]] = {
        "p": "pickUpState",
        "r": "dropState",
        "sg": "saveGameState",
        "f": "fastTravelState",
        "c": "combineItemsState",
        "u": "useItemState",
        "lg": "loadGameState",
    }

    def execute_command(self, command: str) -> None:
        if command in self._moves:
            self.move_request.emit(self._moves[command])
        elif command in self._transitions:
            self.change_state_request.emit(self._transitions[command])
        elif command == "l":
            self.description_request.emit()
        elif command == "sp":
            self.set_save_point_request.emit()
        else:
            self.issue_console_output.emit(UNKNOWN_COMMAND)

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        spacer = " " * 5
        lines = (
            "w:  Move up              l:  Inspect environment",
            "s:  Move down            p:  Pick up item",
            "a:  Move left            r:  Drop item",
            "d:  Move right           sg: SaveGame",
            "f:  Fast-Travel          sp: Set Savepoint",
            "c:  Combine items        u:  Use item",
            "lg: Load Game",
        )
        menu = "Please select an option: \n" + "\n".join(spacer + line for line in lines)
        self.issue_console_output.emit(menu)


class _AmountState(State):
    """Shared parsing for '<item>', '<item> all' and '<item> <amount>'."""

    def _dispatch(self, one: Signal, many: Signal, every: Signal, command: str) -> None:
        if command != BACK_COMMAND:
            parts = command.split(" ")
            if len(parts) == 1:
                one.emit(parts[0])
            elif len(parts) == 2:
                name, amount_text = parts
                if amount_text == "all":
                    every.emit(name)
                else:
                    amount = _to_int(amount_text)
                    if amount is None:
                        self.issue_console_output.emit(UNKNOWN_COMMAND)
                    else:
                        many.emit(name, amount)
            else:
                self.issue_console_output.emit(UNKNOWN_COMMAND)
        self.change_state_request.emit("idleState")


class PickUpState(_AmountState):
    """Picks items up from the current field."""

    _signal_names = State._signal_names + (
        "list_available_items_request",
        "pick_up_one_request",
        "pick_up_many_request",
        "pick_up_all_request",
    )

    def execute_command(self, command: str) -> None:
        self._dispatch(
            self.pick_up_one_request,
            self.pick_up_many_request,
            self.pick_up_all_request,
            command,
        )

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.list_available_items_request.emit()
        self.issue_console_output.emit("b: Return into main-menu")
        self.issue_console_output.emit(
            "Select the item that you want to pick up.\n   Specify the amount or type 'all'."
        )


class DropState(_AmountState):
    """Drops items from the inventory onto the current field."""

    _signal_names = State._signal_names + (
        "list_inventory_request",
        "drop_one_request",
        "drop_many_request",
        "drop_all_request",
    )

    def execute_command(self, command: str) -> None:
        self._dispatch(
            self.drop_one_request,
            self.drop_many_request,
            self.drop_all_request,
            command,
        )

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.list_inventory_request.emit()
        self.issue_console_output.emit(
            "Select the item that you want to drop.\n   Specify the amount or type 'all'."
        )
        self.issue_console_output.emit("b: Return into main-menu")


class FastTravelState(State):
    """Travels to an unlocked save point."""

    _signal_names = State._signal_names + ("fast_travel_request", "list_save_points_request")

    def execute_command(self, command: str) -> None:
        if command != BACK_COMMAND:
            self.fast_travel_request.emit(command)
        self.change_state_request.emit("idleState")

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.list_save_points_request.emit()
        self.issue_console_output.emit("b: Return into main-menu")
        self.issue_console_output.emit("Enter the desired save-point:")


class CombineItemsState(State):
    """Combines two inventory items."""

    _signal_names = State._signal_names + ("list_inventory_request", "combine_items_request")

    def execute_command(self, command: str) -> None:
        if command != BACK_COMMAND:
            self.combine_items_request.emit(command)
        self.change_state_request.emit("idleState")

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.list_inventory_request.emit()
        self.issue_console_output.emit("b: Return into main-menu")
        self.issue_console_output.emit(
            "Enter the names of the two items that you want to combine.\n   Separate them with a space."
        )


class UseItemState(State):
    """Uses an inventory item on the current field."""

    _signal_names = State._signal_names + ("list_inventory_request", "use_item_request")

    def execute_command(self, command: str) -> None:
        if command != BACK_COMMAND:
            self.use_item_request.emit(command)
        self.change_state_request.emit("idleState")

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.list_inventory_request.emit()
        self.issue_console_output.emit("b: Return into main-menu")
        self.issue_console_output.emit("Enter name of the item that you intend to use:")


class SaveGameState(State):
    """Asks whether to save the game."""

    _signal_names = State._signal_names + ("save_game_request",)

    def execute_command(self, command: str) -> None:
        if command != BACK_COMMAND:
            self.save_game_request.emit()
        self.change_state_request.emit("idleState")

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.issue_console_output.emit(
            "Do you want to save the game?.\n   y: Save the game\n   n: Return to main-menu"
        )


class LoadGameState(State):
    """Loads a save point chosen by its number, from within a running game."""

    _signal_names = State._signal_names + ("load_game_request", "list_savepoints_request")

    def execute_command(self, command: str) -> None:
        if command == BACK_COMMAND:
            return
        index = _to_int(command)
        if index is None:
            self.issue_console_output.emit("Please enter a valid number")
        else:
            self.load_game_request.emit(index)

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.issue_console_output.emit("Please select a savepoint:")
        self.list_savepoints_request.emit()
        self.issue_console_output.emit("b: Return to main-menu")


class NewGameState(State):
    """Asks for the player's name to start a new game."""

    _signal_names = State._signal_names + ("new_game_request",)

    def execute_command(self, command: str) -> None:
        if command:
            self.new_game_request.emit(command)
        else:
            self.issue_console_output.emit("Please enter a name")

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.issue_console_output.emit("Welcome.\n   Please enter your name:")


class InitialLoadGameState(State):
    """Loads a save point chosen by its number, from the title screen."""

    _signal_names = State._signal_names + ("load_game_request", "list_savepoints_request")

    def execute_command(self, command: str) -> None:
        index = _to_int(command)
        if index is None:
            self.issue_console_output.emit("Please enter a valid number")
        else:
            self.load_game_request.emit(index)

    def print_menu(self) -> None:
        self.issue_console_output.emit(SEPARATOR)
        self.issue_console_output.emit("Please select a savepoint:")
        self.list_savepoints_request.emit()


class States:
    """One instance of every state, looked up by its name."""

    def __init__(self) -> None:
        self.idle_state = IdleState()
        self.pick_up_state = PickUpState()
        self.drop_state = DropState()
        self.fast_travel_state = FastTravelState()
        self.combine_items_state = CombineItemsState()
        self.use_item_state = UseItemState()
        self.save_game_state = SaveGameState()
        self.load_game_state = LoadGameState()
        self.new_game_state = NewGameState()
        self.initial_load_game_state = InitialLoadGameState()
        self._by_name: dict[str, State] = {
            "idleState": self.idle_state,
            "pickUpState": self.pick_up_state,
            "dropState": self.drop_state,
            "fastTravelState": self.fast_travel_state,
            "combineItemsState": self.combine_items_state,
            "useItemState": self.use_item_state,
            "saveGameState": self.save_game_state,
            "loadGameState": self.load_game_state,
            "newGameState": self.new_game_state,
            "initialLoadGameState": self.initial_load_game_state,
        }

    def get(self, name: str) -> State:
        """Return the state registered under ``name``; raise KeyError if unknown."""
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)
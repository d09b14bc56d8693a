"""The game: owns the level, the player and the menu states, and handles save files."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Mapping

from .field import Field
from .item import _text
from .level import Level
from .player import Player
from .signals import Signal
from .states import State, States, _to_int

FIELDS_BLUEPRINT = "fields_blueprint.json"
PLAYER_BLUEPRINT = "player_blueprint.json"
SAVEPOINTS_FILE = "savepoints.json"
INVALID_AMOUNT = "Please enter a positive amount"

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def save_file_stem(timestamp: str) -> str:
    """Turn a save point's timestamp into the stem used for its file names."""
    return timestamp.replace(":", "").replace(" ", "_")


def _text_date(moment: datetime) -> str:
    """Format a moment like 'Wed May 20 03:40:13 1998', independent of locale."""
    return (
        f"{_DAYS[moment.weekday()]} {_MONTHS[moment.month - 1]} {moment.day} "
        f"{moment.hour:02}:{moment.minute:02}:{moment.second:02} {moment.year}"
    )


def _read_object(path: Path) -> dict[str, Any]:
    """Read a JSON object from a file; unparsable content counts as an empty object."""
    content = path.read_text(encoding="utf-8")
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def _write_object(path: Path, data: Mapping[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")


def _entry_text(entry: Any, key: str) -> str:
    return _text(entry, key) if isinstance(entry, Mapping) else ""


class Game:
    """Ties the level, the player and the menu states together."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.clock: Callable[[], datetime] = datetime.now
        self.level = Level()
        self.player = Player(self.level)
        self.states = States()
        self.current_state: State | None = None
        self.issue_console_output = Signal()
        self.load_button_images = Signal()
        self.update_button_image = Signal()
        self._wire()

    def _amount_slot(self, action: Callable[[str, int], Any]) -> Callable[[str, int], None]:
        def slot(item_type: str, amount: int) -> None:
            try:
                action(item_type, amount)
            except ValueError:
                self.issue_console_output.emit(INVALID_AMOUNT)

        return slot

    def _wire(self) -> None:
        forward = self.issue_console_output.emit
        player = self.player
        states = self.states

        self.level.issue_console_output.connect(forward)
        self.level.player_dies.connect(player.die)
        player.issue_console_output.connect(forward)

        for name in states:
            state = states.get(name)
            state.issue_console_output.connect(forward)
            state.change_state_request.connect(self.change_state)

        idle = states.idle_state
        idle.move_request.connect(player.move)
        idle.description_request.connect(player.describe_field)
        idle.save_game_request.connect(self.save_game)
        idle.set_save_point_request.connect(player.set_save_point)

        pick = states.pick_up_state
        pick.list_available_items_request.connect(player.list_available_items_on_field)
        pick.pick_up_one_request.connect(player.pick_up_item_of_type)
        pick.pick_up_many_request.connect(self._amount_slot(player.pick_up_multiple_items_of_type))
        pick.pick_up_all_request.connect(player.pick_up_all_items_of_type)

        drop = states.drop_state
        drop.list_inventory_request.connect(player.list_inventory)
        drop.drop_one_request.connect(player.drop_item_of_type)
        drop.drop_many_request.connect(self._amount_slot(player.drop_multiple_items_of_type))
        drop.drop_all_request.connect(player.drop_all_items_of_type)

        travel = states.fast_travel_state
        travel.fast_travel_request.connect(player.fast_travel)
        travel.list_save_points_request.connect(player.list_available_save_points)

        combine = states.combine_items_state
        combine.combine_items_request.connect(player.combine_items)
        combine.list_inventory_request.connect(player.list_inventory)

        use = states.use_item_state
        use.use_item_request.connect(player.use_item)
        use.list_inventory_request.connect(player.list_inventory)

        states.save_game_state.save_game_request.connect(self.save_game)

        states.load_game_state.load_game_request.connect(self.load_game)
        states.load_game_state.list_savepoints_request.connect(self.list_save_points)

        states.new_game_state.new_game_request.connect(self.new_game)

        initial = states.initial_load_game_state
        initial.load_game_request.connect(self.load_game)
        initial.list_savepoints_request.connect(self.list_save_points_for_menu)

    @property
    def _savepoints_path(self) -> Path:
        return self.directory / SAVEPOINTS_FILE

    def _read_savepoints_object(self) -> dict[str, Any]:
        try:
            return _read_object(self._savepoints_path)
        except FileNotFoundError:
            return {}

    def _read_savepoints(self) -> list[Any] | None:
        """The list of save point entries, or None if the file cannot be read."""
        try:
            data = self._read_savepoints_object()
        except OSError:
            return None
        entries = data.get("savepoints")
        return entries if isinstance(entries, list) else []

    @staticmethod
    def _format_savepoints(entries: list[Any]) -> str:
        lines = [
            f"{index}:   {_entry_text(entry, 'name')}   {_entry_text(entry, 'dateTime')}"
            for index, entry in enumerate(entries)
        ]
        answer = "\n   ".join(lines)
        if len(lines) == 1:
            answer += "\n"
        return answer

    def new_game(self, player_name: str) -> None:
        """Start a new game from the blueprint files; raises OSError if one is missing."""
        self.level.read(_read_object(self.directory / FIELDS_BLUEPRINT))
        self.player.read(_read_object(self.directory / PLAYER_BLUEPRINT))
        self.player.name = player_name
        self.issue_console_output.emit("New Game was successfully created")
        self.change_state("idleState")

    def list_save_points(self) -> None:
        """Report the stored save points."""
        entries = self._read_savepoints()
        if entries is None:
            self.issue_console_output.emit("Couldn't find a savepoints file")
            return
        if not entries:
            self.issue_console_output.emit("You haven't set any savepoints yet")
            return
        self.issue_console_output.emit(self._format_savepoints(entries))

    def list_save_points_for_menu(self) -> None:
        """Report the stored save points, or fall back to a new game if there are none."""
        entries = self._read_savepoints()
        if entries is None:
            self.issue_console_output.emit("Couldn't find a savepoints file")
            return
        if not entries:
            self.issue_console_output.emit(
                "You don't haven't created any savepoints yet.\n   Please start a new game."
            )
            self.change_state("newGameState")
            self.states.new_game_state.print_menu()
            return
        self.issue_console_output.emit(self._format_savepoints(entries))

    def load_game(self, savepoint_index: int) -> bool:
        """Load the save point with this index; False if it cannot be chosen.

        Raises OSError if the save point's files are missing.
        """
        entries = self._read_savepoints()
        if entries is None:
            self.issue_console_output.emit("Couldn't find a savepoints file")
            return False
        if not 0 <= savepoint_index < len(entries):
            self.issue_console_output.emit("Please enter a number that is in the specified range")
            return False

        stem = save_file_stem(_entry_text(entries[savepoint_index], "dateTime"))
        fields_data = _read_object(self.directory / f"fields_{stem}.json")

        raw_fields = fields_data.get("fields")
        for raw in raw_fields if isinstance(raw_fields, list) else []:
            if not isinstance(raw, Mapping):
                continue
            field = Field.from_json(raw)
            if field.discovered == "1":
                self.update_button_image.emit(field.icon_name(False), "Field_" + field.id)

        self.level.read(fields_data)

        player_data = _read_object(self.directory / f"player_{stem}.json")
        position = _text(player_data, "currentFieldId")
        current = self.level.get_field(position)
        self.update_button_image.emit(current.icon_name(True), "Field_" + position)

        self.player.read(player_data)
        self.issue_console_output.emit("Savepoint was successfully loaded")
        self.change_state("idleState")
        return True

    def save_game(self) -> None:
        """Record a save point and write the player and the fields to disk."""
        timestamp = _text_date(self.clock().replace(microsecond=0))

        data = self._read_savepoints_object()
        entries = data.get("savepoints")
        entries = list(entries) if isinstance(entries, list) else []
        entries.append({"dateTime": timestamp, "name": self.player.name})
        data["savepoints"] = entries
        _write_object(self._savepoints_path, data)

        stem = save_file_stem(timestamp)
        _write_object(self.directory / f"player_{stem}.json", self.player.write())
        _write_object(self.directory / f"fields_{stem}.json", self.level.write())

        self.issue_console_output.emit("Game sucessfully saved")

    def handle_command(self, command: str) -> None:
        """Pass a command to the active state, then print the menu of the state now active."""
        if self.current_state is None:
            raise RuntimeError("no menu state is active")
        self.current_state.execute_command(command)
        self.current_state.print_menu()

    def change_state(self, state_name: str) -> None:
        """Activate the named state; unknown names are ignored."""
        if state_name in self.states:
            self.current_state = self.states.get(state_name)

    def input_handler(self, text: str) -> str:
        """Interpret a free-text command and return the answer."""
        if text in ("ai", "available items"):
            return self.player.list_available_items_on_field()

        parts = text.split(" ")
        verb = parts[0]
        picking = verb in ("p", "pickup")
        dropping = verb in ("d", "drop")

        if len(parts) == 2:
            if picking:
                return self.player.pick_up_item_of_type(parts[1])
            if dropping:
                return self.player.drop_item_of_type(parts[1])

        if len(parts) == 3 and (picking or dropping):
            item_type, amount_text = parts[1], parts[2]
            take_all = amount_text in ("a", "all")
            amount = _to_int(amount_text) or 0
            if picking:
                if take_all:
                    return self.player.pick_up_all_items_of_type(item_type)
                return self.player.pick_up_multiple_items_of_type(item_type, amount)
            if take_all:
                return self.player.drop_all_items_of_type(item_type)
            return self.player.drop_multiple_items_of_type(item_type, amount)

        if verb == "use":
            item_name = text[4:]
            field = self.player.current_field
            if self.player.has_item(item_name) or (field is not None and field.has_item(item_name)):
                if field is None:
                    raise RuntimeError("the player has not been placed on a field")
                return self.level.use_item(field, item_name)
            return "Can't find item: " + item_name

        return (
            "No fitting interpretation was found for: " + text + "\n      Please try something else."
        )

    def set_state_to_new_game(self) -> None:
        """Activate the new-game menu."""
        self.current_state = self.states.new_game_state

    def set_state_to_initial_load(self) -> None:
        """Activate the menu for loading a save point from the title screen."""
        self.change_state("initialLoadGameState")
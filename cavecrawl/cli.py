"""A text console front end for the game, with a command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .field import Field
from .game import Game
from .inventory import Inventory

HELP_TEXT = (
    "Hello users of the DET-3026 is at your disposal. \n"
    " Use the following buttons to move forward:\n"
    "mb==move bage\nmf==move forward\nml==move levt left\nmr==move right\n\n"
    "And the following for interaction:p==pick-up\nd==drop only one item\n"
    "a==drop multiple or all available items\nai==available items\n\n"
)

MAILS = {
    0: "Ihr erster autrag ist es die welt zu fernichten.",
    1: "Wilkimm auf der worschungseinritung TJ-0015.",
}

# Number of progress marks drawn while "reading memory" during boot.
_MEMORY_MARKS = len(range(4250, 7600, 200))


class Console:
    """Shows the game's output on a text stream and keeps the map and inventory views."""

    def __init__(self, game: Game, stream: TextIO | None = None) -> None:
        self.game = game
        self.stream = stream if stream is not None else sys.stdout
        self.button_images: dict[str, str] = {}
        self.inventory_table: dict[str, int] = {}
        self.input_enabled = False

        game.issue_console_output.connect(self.print_onto_console)
        game.update_button_image.connect(self.update_button_image)
        game.player.picked_up_items.connect(self.update_inventory_add)
        game.player.dropped_items.connect(self.update_inventory_remove)
        game.player.moved.connect(self.update_position)

    def _append(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def print_onto_console(self, text: str) -> None:
        """Show one line of game output with the console prompt."""
        self._append("~$ " + text)

    def update_button_image(self, image_name: str, button_name: str) -> None:
        """Record the image shown on a map button."""
        self.button_images[button_name] = image_name

    def update_position(self, new_field: Field, last_field_id: str) -> None:
        """Move the player marker from the last field to the new one on the map."""
        self.update_button_image(new_field.icon_name(True), "Field_" + new_field.id)
        last_field = self.game.level.get_field(last_field_id)
        self.update_button_image(last_field.icon_name(False), "Field_" + last_field_id)

    def update_inventory_add(self, item_name: str, inventory: Inventory) -> None:
        """Show the new amount of an item after it was picked up."""
        self.inventory_table[item_name] = inventory.get_item_amount(item_name)

    def update_inventory_remove(self, item_name: str, inventory: Inventory) -> None:
        """Show the new amount of an item after it was dropped; remove it at zero."""
        amount = inventory.get_item_amount(item_name)
        if amount == 0:
            self.inventory_table.pop(item_name, None)
        elif item_name in self.inventory_table:
            self.inventory_table[item_name] = amount

    def print_system_boot(self, new_game: bool) -> None:
        """Show the boot sequence, enable input and open the first menu."""
        if new_game:
            self.update_button_image("p_e.png", "Field_1")
        self._append("I'm initializing please wait")
        self._append("I have successfully initialized")
        self._append("Reading my memory: <" + "-" * _MEMORY_MARKS + ">")
        self._append("Memory was successfully read")
        self._append("Welcome")
        self.input_enabled = True
        if new_game:
            self.game.set_state_to_new_game()
            self.game.states.new_game_state.print_menu()
        else:
            self.game.set_state_to_initial_load()
            self.game.states.initial_load_game_state.print_menu()

    def show_help(self) -> None:
        """Show the help text."""
        self._append(HELP_TEXT)

    def read_mail(self, row: int) -> None:
        """Show the story mail in the given row; other rows show nothing."""
        mail = MAILS.get(row)
        if mail is not None:
            self._append(mail)

    def submit(self, text: str) -> None:
        """Echo a typed command and hand it to the game."""
        if not self.input_enabled:
            raise RuntimeError("console input is disabled until the system has booted")
        command = text.strip()
        if command:
            self.print_onto_console("Input: " + command)
        self.game.handle_command(command)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cavecrawl", description="A text adventure in the caves.")
    parser.add_argument("--directory", default=".", help="folder holding blueprints and save files")
    parser.add_argument("--load", action="store_true", help="load a save point instead of a new game")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the game on standard input and output.

    Lines starting with ':' control the console itself: ':help', ':mail N'
    and ':quit' (which saves the game before leaving).
    """
    args = _build_parser().parse_args(argv)
    game = Game(args.directory)
    console = Console(game, sys.stdout)
    console.print_system_boot(not args.load)

    for line in sys.stdin:
        text = line.rstrip("\n")
        if text.startswith(":"):
            word, _, rest = text[1:].partition(" ")
            if word == "quit":
                game.save_game()
                break
            if word == "help":
                console.show_help()
            elif word == "mail" and rest.strip().isdigit():
                console.read_mail(int(rest.strip()))
            else:
                console.print_onto_console("Unknown console command: " + text)
            continue
        try:
            console.submit(text)
        except OSError as error:
            console.print_onto_console(f"Can't open file: {error.filename or error}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
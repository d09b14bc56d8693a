# cavecrawl

A small text adventure set in a network of caves. You move from field to
field, inspect your surroundings, pick up and drop items, combine and use
them to open blocked passages, set save points to fast-travel between, and
save or load your progress as JSON files.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Playing

Start the game from a directory that holds the level blueprints
(`fields_blueprint.json` and `player_blueprint.json`), or point it at one:

```
cavecrawl
cavecrawl --directory path/to/blueprints
cavecrawl --load
```

Without `--load` a new game starts and you are asked for your name. With
`--load` you are shown the stored save points and asked for the number of
the one to load; if there are none, the game falls back to asking for a
name.

Commands are read line by line from standard input. Lines starting with `:`
control the console itself:

- `:help` shows a help text,
- `:mail N` shows story mail number `N` (0 or 1),
- `:quit` saves the game and leaves.

Saved games are written into the game directory: `savepoints.json` lists
them by player name and time, and each save has its own `fields_<time>.json`
and `player_<time>.json`.

### Main menu

```
w:  Move up              l:  Inspect environment
s:  Move down            p:  Pick up item
a:  Move left            r:  Drop item
d:  Move right           sg: SaveGame
f:  Fast-Travel          sp: Set Savepoint
c:  Combine items        u:  Use item
lg: Load Game
```

In the pick-up and drop menus enter an item name, optionally followed by an
amount or `all`. In the pick-up, drop, fast-travel, combine, use and save
menus `b` returns to the main menu without acting; in the save menu any
other input saves the game. In the load menu a number loads that save point.

## Using it as a library

The pieces are plain Python objects wired together with a small `Signal`
class (`connect` a callable, `emit` arguments to every connected callable):

- `cavecrawl.signals` — `Signal`.
- `cavecrawl.item` — `Item` and `SavePoint`, each with `from_json` and
  `to_json`.
- `cavecrawl.field` — `Field`, one square of the map, with its exits
  (`up`, `down`, `left`, `right`; `"x"` means no passage, `"b"` a blocked
  one), items, an optional save point, and `icon_name` for the map image.
- `cavecrawl.inventory` — `Inventory`, the player's collected items.
- `cavecrawl.level` — `Level`, the set of fields, the events tied to
  entering some of them, and `use_item`.
- `cavecrawl.states` — the menu states (`IdleState`, `PickUpState`,
  `DropState`, `FastTravelState`, `CombineItemsState`, `UseItemState`,
  `SaveGameState`, `LoadGameState`, `NewGameState`,
  `InitialLoadGameState`) gathered in `States`, looked up with
  `States.get(name)`.
- `cavecrawl.player` — `Player`: moving, picking up, dropping, combining and
  using items, save points and fast travel.
- `cavecrawl.game` — `Game`, which owns the level, the player and the current
  state, and reads and writes save files in a chosen directory; also
  `save_file_stem`, which turns a save time into a file-name stem.
- `cavecrawl.cli` — `Console`, the terminal front end, and `main`.

```python
from cavecrawl.game import Game

game = Game("path/to/blueprints")
game.issue_console_output.connect(print)
game.new_game("Ada")
game.handle_command("l")
```

`Game.input_handler(text)` interprets a free-text command instead
(`ai`, `p <item>`, `drop <item> all`, `use <item>`, …) and returns the
answer as a string.

## What it does not do

- There is no graphical window. The map is kept only as data:
  `Console.button_images` maps each map button name (`Field_<id>`) to the
  image name it would show, and `Console.inventory_table` holds the item
  counts; neither is drawn.
- No level is shipped. The blueprint files `fields_blueprint.json` and
  `player_blueprint.json` must be supplied; if one is missing, starting a new
  game reports that the file cannot be opened.
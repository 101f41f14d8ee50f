# dungeon_crawler

A small turn-based dungeon crawler played in the terminal. The hero (`X`) walks
across a grid of floor tiles (`.`), is stopped by walls (`#`) and is carried
between linked portals (`O`).

## Installation

```
pip install .
```

## Playing

```
dungeon-crawler
```

The command takes no options other than `--help`. The built-in level is
printed under the heading `Aktuelles Level:` at the start and again after every
turn, and each turn the prompt `Bitte eingeben (1.9, 5=stehen, 0=exit):` asks
for one number per line, laid out like a numeric keypad:

| Key | Move        |
|-----|-------------|
| 7   | up-left     |
| 8   | up          |
| 9   | up-right    |
| 4   | left        |
| 5   | stay        |
| 6   | right       |
| 1   | down-left   |
| 2   | down        |
| 3   | down-right  |
| 0   | quit        |

Any other number is reported as `Ungültige Eingabe` and the hero stays where it
is; a line that is not a number is ignored in the same way. The end of input
ends the game like `0`. Moves into a wall or off the edge of the level do
nothing. When the game ends, `Spiel beendet` is printed.

Stepping onto a portal moves the hero to the portal it is paired with. Portals
are paired in the order they appear in the level, reading row by row: the first
with the second, the third with the fourth, and so on.

## Using it as a library

```python
import io

from dungeon_crawler.game import DungeonCrawler
from dungeon_crawler.level import Level
from dungeon_crawler.ui import TerminalUI

ui = TerminalUI(stdin=io.StringIO("6\n2\n0\n"), stdout=io.StringIO())
game = DungeonCrawler(ui=ui, level=Level())
game.run()
print(game.level.player.tile)  # Floor(3, 3)
```

- `dungeon_crawler.level.Level(layout)` builds a grid from equal-length strings
  of `#`, `.` and `O`; any other character becomes floor. It raises
  `ValueError` for an empty layout, rows of different lengths, or an odd number
  of portals. The hero is always placed at row 2, column 2 (if that position is
  inside the layout). `tile_at(row, column)` returns the tile there, or `None`
  outside the level; `rows()` yields the rows of tiles; `height`, `width`,
  `player` and `characters` describe the level; `place_character(character,
  row, column)` puts a character on a tile without any enter rules.
- `dungeon_crawler.tiles` holds `Tile` and its kinds `Floor`, `Wall` and
  `Portal`. `Tile.move_to(destination, who)` moves a character and returns
  whether it succeeded; `on_enter(who)` decides whether a tile may be entered
  and where the character lands instead; `Portal.destination` is its partner.
- `dungeon_crawler.character.Character` has a `texture`, the `tile` it stands
  on and an optional `ui`; `next_move()` asks that interface for a move, or
  stands still without one.
- `dungeon_crawler.ui` has the frozen `Input` record (`dr`, `dc`, `quit`),
  `parse_direction(value)` turning a keypad number into an `Input` (raising
  `ValueError` for anything other than 0–9), and `TerminalUI(stdin, stdout)`.
  A different front end can be written by subclassing `AbstractUI` and
  implementing `draw(level)` and `move()`.
- `dungeon_crawler.game.DungeonCrawler(ui, level)` draws the level once, then
  `turn()` plays one turn and returns `False` when the game is over, and `run()`
  plays until then.

## What it does not do

There is a single level and a single hero: no enemies, items, combat, scoring,
further levels, or saving and loading of a game. The command always plays the
built-in level; custom layouts are only available through `Level`.

## Running the tests

```
pip install .[test]
pytest
```
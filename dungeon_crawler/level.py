"""A level: a grid of tiles built from a text layout, and the characters in it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dungeon_crawler.character import Character
from dungeon_crawler.tiles import Floor, Portal, Tile, Wall

DEFAULT_LAYOUT: tuple[str, ...] = (
    "##########",
    "#O.......#",
    "#........#",
    "#........#",
    "#........#",
    "#........#",
    "##########",
    "#O.......#",
    "#........#",
    "##########",
)
START_POSITION = (2, 2)
PLAYER_TEXTURE = "X"

_TILE_TYPES: dict[str, type[Tile]] = {"#": Wall, ".": Floor, "O": Portal}


class Level:
    """A rectangular grid of tiles with a player placed at the start position.

    Portals are paired in reading order: the first with the second, the third
    with the fourth, and so on. Unknown layout characters become floor.
    """

    def __init__(self, layout: Iterable[str] = DEFAULT_LAYOUT) -> None:
        lines = list(layout)
        if not lines:
            raise ValueError("layout must have at least one row")
        width = len(lines[0])
        self._grid: list[list[Tile]] = []
        portals: list[Portal] = []
        for r, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"row {r} has length {len(line)}, expected {width}")
            row: list[Tile] = []
            for c, symbol in enumerate(line):
                tile = _TILE_TYPES.get(symbol, Floor)(r, c)
                if isinstance(tile, Portal):
                    portals.append(tile)
                row.append(tile)
            self._grid.append(row)

        if len(portals) % 2:
            raise ValueError("portals must come in pairs")
        for first, second in zip(portals[::2], portals[1::2]):
            first.destination = second
            second.destination = first

        self.characters: list[Character] = []
        hero = Character(PLAYER_TEXTURE)
        self.characters.append(hero)
        self.place_character(hero, *START_POSITION)

    @property
    def height(self) -> int:
        return len(self._grid)

    @property
    def width(self) -> int:
        return len(self._grid[0])

    @property
    def player(self) -> Character | None:
        """The first character, or None if there is none."""
        return self.characters[0] if self.characters else None

    def tile_at(self, row: int, column: int) -> Tile | None:
        """The tile at the position, or None outside the level."""
        if 0 <= row < self.height and 0 <= column < self.width:
            return self._grid[row][column]
        return None

    def place_character(self, character: Character, row: int, column: int) -> None:
        """Put a character on a tile without any enter rules; ignored outside the level."""
        tile = self.tile_at(row, column)
        if tile is None:
            return
        if character.tile is not None:
            character.tile.character = None
        tile.character = character
        character.tile = tile

    def rows(self) -> Iterator[tuple[Tile, ...]]:
        """Yield the rows of tiles from top to bottom."""
        for row in self._grid:
            yield tuple(row)
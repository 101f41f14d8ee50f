"""Tiles of a level: floors, walls and portals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeon_crawler.character import Character


class Tile(ABC):
    """A cell of the level that may hold one character."""

    def __init__(self, texture: str, row: int, column: int) -> None:
        self.base_texture = texture
        self.row = row
        self.column = column
        self.character: Character | None = None

    @property
    def texture(self) -> str:
        """The occupant's texture if there is one, else the tile's own."""
        if self.character is not None:
            return self.character.texture
        return self.base_texture

    @property
    def has_character(self) -> bool:
        return self.character is not None

    def move_to(self, destination: Tile | None, who: Character | None) -> bool:
        """Move a character from this tile towards destination; True on success."""
        if destination is None or who is None:
            return False
        if not self.on_leave(destination, who):
            return False
        allowed, alternative = destination.on_enter(who)
        if not allowed:
            return False
        entered = alternative if alternative is not None else destination
        if self.character is who:
            self.character = None
        entered.character = who
        who.tile = entered
        return True

    def on_leave(self, destination: Tile, who: Character) -> bool:
        """Whether who may leave this tile; always allowed."""
        return True

    @abstractmethod
    def on_enter(self, who: Character) -> tuple[bool, Tile | None]:
        """Whether who may enter, and an alternative tile to land on instead."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.row}, {self.column})"


class Floor(Tile):
    """Walkable ground."""

    def __init__(self, row: int, column: int) -> None:
        super().__init__(".", row, column)

    def on_enter(self, who: Character) -> tuple[bool, Tile | None]:
        return True, None


class Wall(Tile):
    """An impassable tile."""

    def __init__(self, row: int, column: int) -> None:
        super().__init__("#", row, column)

    def on_enter(self, who: Character) -> tuple[bool, Tile | None]:
        return False, None


class Portal(Tile):
    """A tile that sends whoever enters it to its destination."""

    def __init__(self, row: int, column: int) -> None:
        super().__init__("O", row, column)
        self.destination: Tile | None = None

    def on_enter(self, who: Character) -> tuple[bool, Tile | None]:
        return self.destination is not None, self.destination
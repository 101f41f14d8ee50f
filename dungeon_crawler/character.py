"""Characters that stand on tiles and take their moves from a user interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dungeon_crawler.ui import AbstractUI, Input

if TYPE_CHECKING:
    from dungeon_crawler.tiles import Tile


class Character:
    """A figure in the level with a texture, a position and an optional controller."""

    def __init__(self, texture: str) -> None:
        self.texture = texture
        self.tile: Tile | None = None
        self.ui: AbstractUI | None = None

    def next_move(self) -> Input:
        """Ask the attached interface for a move; without one, stand still."""
        return self.ui.move() if self.ui is not None else Input()

    def __repr__(self) -> str:
        return f"Character({self.texture!r})"
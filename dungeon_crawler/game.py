"""The game loop and its command-line entry point."""

from __future__ import annotations

import argparse
import sys

from dungeon_crawler.level import Level
from dungeon_crawler.ui import AbstractUI, TerminalUI

GOODBYE = "Spiel beendet"


class DungeonCrawler:
    """Connects a level with a user interface and plays it turn by turn."""

    def __init__(self, ui: AbstractUI | None = None, level: Level | None = None) -> None:
        self.level = level if level is not None else Level()
        self.ui = ui if ui is not None else TerminalUI()
        player = self.level.player
        if player is not None:
            player.ui = self.ui
        self.ui.draw(self.level)

    def turn(self) -> bool:
        """Play one turn; False when the game is over."""
        player = self.level.player
        if player is None:
            return False
        move = player.next_move()
        if move.quit:
            return False
        current = player.tile
        if current is not None:
            destination = self.level.tile_at(current.row + move.dr, current.column + move.dc)
            if destination is not None:
                current.move_to(destination, player)
        self.ui.draw(self.level)
        return True

    def run(self) -> None:
        """Play turns until the game ends."""
        while self.turn():
            pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dungeon-crawler", description="Walk through a dungeon in the terminal."
    )
    parser.parse_args(argv)
    DungeonCrawler().run()
    sys.stdout.write(GOODBYE + "\n")
    return 0
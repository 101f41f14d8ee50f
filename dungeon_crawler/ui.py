"""User interfaces: the input record, the abstract interface and a terminal front end."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from dungeon_crawler.level import Level

HEADER = "Aktuelles Level:\n\n"
PROMPT = "\nBitte eingeben (1.9, 5=stehen, 0=exit): "
INVALID_MESSAGE = "Ungültige Eingabe\n"


@dataclass(frozen=True)
class Input:
    """A requested move as a row/column offset, or a request to quit."""

    dr: int = 0
    dc: int = 0
    quit: bool = False


# Numeric keypad layout: 8 is up, 2 is down, 5 stays in place.
_DIRECTIONS: dict[int, tuple[int, int]] = {
    1: (1, -1),
    2: (1, 0),
    3: (1, 1),
    4: (0, -1),
    5: (0, 0),
    6: (0, 1),
    7: (-1, -1),
    8: (-1, 0),
    9: (-1, 1),
}


def parse_direction(value: int) -> Input:
    """Turn a keypad number into an Input; 0 means quit."""
    if value == 0:
        return Input(quit=True)
    try:
        dr, dc = _DIRECTIONS[value]
    except KeyError:
        raise ValueError(f"invalid direction: {value!r}") from None
    return Input(dr, dc)


class AbstractUI(ABC):
    """Interface through which the game shows the level and asks for moves."""

    @abstractmethod
    def draw(self, level: Level) -> None:
        """Show the current state of the level."""

    @abstractmethod
    def move(self) -> Input:
        """Ask for the next move."""


class TerminalUI(AbstractUI):
    """Text front end reading keypad numbers, one per line."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def draw(self, level: Level) -> None:
        self.stdout.write(HEADER)
        for row in level.rows():
            self.stdout.write("".join(tile.texture for tile in row) + "\n")
        self.stdout.flush()

    def move(self) -> Input:
        self.stdout.write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return Input(quit=True)
        try:
            value = int(line)
        except ValueError:
            return Input()
        try:
            return parse_direction(value)
        except ValueError:
            self.stdout.write(INVALID_MESSAGE)
            self.stdout.flush()
            return Input()
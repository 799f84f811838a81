"""Loading and validating ``.ber`` maps.

A map is a block of lines made of ``1`` (wall), ``0`` (floor), ``P``
(player start), ``C`` (coin) and ``E`` (exit). Every line but the last ends
with a newline; the last one has none.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Sequence, Union

from .textutil import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COIN = "C"
EXIT = "E"
ALLOWED_TILES = frozenset({WALL, FLOOR, PLAYER, COIN, EXIT})

_EMPTY_MESSAGE = "There are only NULL characters inside the map!"


class MapError(Exception):
    """Raised when a map file is missing, empty or malformed."""


@dataclass
class GameMap:
    """A validated map: its rows without newlines and the number of coins."""

    rows: list[str] = field(default_factory=list)
    coins: int = 0

    @property
    def width(self) -> int:
        """Number of tiles in a row."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)


def load_lines(path: Union[str, "PathLike[str]"]) -> list[str]:
    """Read a map file into lines that keep their trailing newlines."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = list(read_lines(stream))
    except OSError as exc:
        raise MapError("There is no map with the requested name!") from exc
    if not lines:
        raise MapError(_EMPTY_MESSAGE)
    return lines


def _require_lines(lines: Sequence[str]) -> None:
    if not lines:
        raise MapError(_EMPTY_MESSAGE)


def _check_top(line: str) -> None:
    last = len(line) - 1
    for index, char in enumerate(line):
        if char == WALL:
            continue
        if index == 0:
            raise MapError("type1:Top wall check failed!")
        if index != last:
            raise MapError("type2:Top wall check failed!")


def _check_middle(line: str) -> None:
    if len(line) < 2 or line[0] != WALL or line[len(line) - 2] != WALL:
        raise MapError("Middle wall check failed!")


def _check_bottom(line: str) -> None:
    if any(char != WALL for char in line):
        raise MapError("Bot wall check failed!")


def check_walls(lines: Sequence[str]) -> None:
    """Check that the map is closed by walls on every side.

    The first line must be all walls up to its final character, each middle
    line must begin and end (before its newline) with a wall, and the last
    line must consist of walls only.
    """
    _require_lines(lines)
    last = len(lines) - 1
    for row, line in enumerate(lines):
        if row == 0:
            _check_top(line)
        elif row != last:
            _check_middle(line)
        else:
            _check_bottom(line)


def check_rectangular(lines: Sequence[str]) -> None:
    """Check that all lines have the same length.

    The last line is expected to lack the newline the others carry.
    """
    _require_lines(lines)
    last = len(lines) - 1
    for row in range(last):
        expected = len(lines[row])
        following = len(lines[row + 1])
        if row + 1 == last:
            following += 1
        if expected != following:
            raise MapError("The map is not rectangular!")


def count_tile(lines: Sequence[str], tile: str) -> int:
    """Count *tile* in the inner rows, skipping the first column."""
    return sum(line[1:].count(tile) for line in lines[1:-1])


def check_characters(lines: Sequence[str]) -> int:
    """Check the required tiles are present and return the number of coins."""
    _require_lines(lines)
    if count_tile(lines, EXIT) == 0:
        raise MapError("There are not enough 'E' characters!")
    if count_tile(lines, PLAYER) != 1:
        raise MapError("There are not enough 'P' characters!")
    if count_tile(lines, FLOOR) == 0:
        raise MapError("There are not enough '0' characters!")
    coins = count_tile(lines, COIN)
    if coins == 0:
        raise MapError("There are not enough 'C' characters!")
    return coins


def check_unwanted(lines: Sequence[str]) -> None:
    """Check that the interior of the map holds only known tiles."""
    _require_lines(lines)
    if len(lines) < 3:
        return
    length = len(lines[1])
    for line in lines[1:-1]:
        for char in line[1:length - 2]:
            if char not in ALLOWED_TILES:
                raise MapError("The map contains UNWANTED CHARacters!")


def validate_map(lines: Sequence[str]) -> GameMap:
    """Run every check in order and build the map."""
    _require_lines(lines)
    check_walls(lines)
    check_rectangular(lines)
    coins = check_characters(lines)
    check_unwanted(lines)
    rows = [line.rstrip("\n") for line in lines]
    return GameMap(rows=rows, coins=coins)


def load_map(path: Union[str, "PathLike[str]"]) -> GameMap:
    """Read and validate the map stored at *path*."""
    return validate_map(load_lines(path))
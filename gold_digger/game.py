"""Game state: the player's moves, coin collection and what to draw where."""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional, Tuple

from .mapcheck import COIN, EXIT, PLAYER, WALL, FLOOR, GameMap
from .printf import printf

TILE_SIZE = 64

KEY_A = 0
KEY_S = 1
KEY_D = 2
KEY_W = 13
KEY_ESCAPE = 53


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


KEY_DIRECTIONS = {
    KEY_W: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_D: Direction.RIGHT,
}


class Sprite(Enum):
    """The images a map is drawn with."""

    PLAYER = "player"
    COIN = "coin"
    EXIT = "exit"
    WALL = "wall"
    SPACE = "space"


_TILE_SPRITES = {WALL: Sprite.WALL, EXIT: Sprite.EXIT, COIN: Sprite.COIN}

Placement = Tuple[Sprite, int, int]


def _print_step(steps: int) -> None:
    printf("%d\n", steps)


class Game:
    """A running game on a validated map.

    Every successful move counts a step and reports it through *on_step*,
    which by default prints the count. Reaching the exit once every coin is
    collected wins the game; the escape key quits it.
    """

    def __init__(
        self, game_map: GameMap, on_step: Optional[Callable[[int], None]] = None
    ) -> None:
        self.grid: List[List[str]] = [list(row) for row in game_map.rows]
        self.coins = game_map.coins
        self.steps = 0
        self.won = False
        self.quit = False
        self._on_step = on_step if on_step is not None else _print_step
        self.player = self._find_player()

    def _find_player(self) -> Tuple[int, int]:
        for row, tiles in enumerate(self.grid):
            if PLAYER in tiles:
                return row, tiles.index(PLAYER)
        raise ValueError("the map has no player start")

    @property
    def finished(self) -> bool:
        """True once the game has been won or quit."""
        return self.won or self.quit

    @property
    def window_size(self) -> Tuple[int, int]:
        """Pixel size of a window that shows the whole map."""
        width = len(self.grid[0]) if self.grid else 0
        return width * TILE_SIZE, len(self.grid) * TILE_SIZE

    def tile_at(self, row: int, col: int) -> str:
        """Return the tile at a grid position."""
        if row < 0 or col < 0:
            raise IndexError("position outside the map")
        return self.grid[row][col]

    def _step(self) -> None:
        self.steps += 1
        self._on_step(self.steps)

    def move(self, direction: Direction) -> bool:
        """Try to move the player one tile; return True if a step was taken."""
        if self.finished:
            return False
        drow, dcol = direction.value
        row, col = self.player
        target = (row + drow, col + dcol)
        tile = self.tile_at(*target)
        if tile == WALL:
            return False
        if tile == EXIT:
            if self.coins:
                return False
            self._step()
            self.won = True
            return True
        if tile == COIN:
            self.grid[target[0]][target[1]] = FLOOR
            self.coins -= 1
        self.player = target
        self._step()
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key code; return True while the game goes on."""
        if self.finished:
            return False
        direction = KEY_DIRECTIONS.get(keycode)
        if direction is not None:
            self.move(direction)
        elif keycode == KEY_ESCAPE:
            self.quit = True
        return not self.finished

    def sprites(self) -> List[Placement]:
        """List what to draw, in order, as (sprite, x, y) in pixels.

        Every tile gets the background first, then its own image; the
        player is drawn on top of the tile it stands on.
        """
        placements: List[Placement] = []
        for row, tiles in enumerate(self.grid):
            for col, tile in enumerate(tiles):
                x, y = col * TILE_SIZE, row * TILE_SIZE
                placements.append((Sprite.SPACE, x, y))
                sprite = _TILE_SPRITES.get(tile)
                if sprite is not None:
                    placements.append((sprite, x, y))
                if (row, col) == self.player:
                    placements.append((Sprite.PLAYER, x, y))
        return placements
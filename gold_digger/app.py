"""The command: validate a map file and play it in a window."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, Union

from .game import KEY_A, KEY_D, KEY_ESCAPE, KEY_S, KEY_W, Game, Sprite
from .mapcheck import GameMap, MapError, load_map
from .printf import printf
from .textutil import has_extension
from .xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

WINDOW_TITLE = "GOLD DIGGER COBRA MURAT"

SPRITE_PATHS: Dict[Sprite, str] = {
    Sprite.PLAYER: "./pics/player64.xpm",
    Sprite.COIN: "./pics/coin64.xpm",
    Sprite.EXIT: "./pics/exit64.xpm",
    Sprite.WALL: "./pics/wall64.xpm",
    Sprite.SPACE: "./pics/back64.xpm",
}

PathType = Union[str, "PathLike[str]"]


def check_sprites(paths: Mapping[Sprite, PathType]) -> Dict[Sprite, XpmImage]:
    """Make sure every sprite file can be opened, then load them all."""
    for path in paths.values():
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise XpmError("There is no XPM FILE!") from exc
    return {sprite: load_xpm(path) for sprite, path in paths.items()}


def _to_surface(pygame, image: XpmImage):
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            value &= 0xFFFFFFFF
            alpha = 0 if value == TRANSPARENT else 255 - ((value >> 24) & 0xFF)
            colour = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)
            surface.set_at((x, y), colour)
    return surface


def run(game_map: GameMap) -> int:
    """Open a window, play the map until it is won or closed; return 0."""
    import pygame

    images = check_sprites(SPRITE_PATHS)
    game = Game(game_map)
    keys = {
        pygame.K_w: KEY_W,
        pygame.K_s: KEY_S,
        pygame.K_a: KEY_A,
        pygame.K_d: KEY_D,
        pygame.K_ESCAPE: KEY_ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode(game.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        surfaces = {sprite: _to_surface(pygame, img) for sprite, img in images.items()}
        clock = pygame.time.Clock()
        while not game.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit = True
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    game.handle_key(keys[event.key])
            for sprite, x, y in game.sprites():
                screen.blit(surfaces[sprite], (x, y))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error\nThe number of ARGC is not enough!")
        return 1
    path = args[0]
    if not has_extension(path, ".ber"):
        printf("Error\nThe file named '.BER' was not found!")
        return 1
    try:
        game_map = load_map(Path(path))
    except MapError as exc:
        printf("Error\n%s\n", str(exc))
        return 1
    try:
        return run(game_map)
    except XpmError as exc:
        printf("Error\n%s\n", str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
"""Window, sprites and event loop of the game."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from solong.game import Direction, Game, MoveResult
from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError, check_map
from solong.xpm import TRANSPARENT, XpmError, XpmImage, read_xpm_file

SPRITE_SIZE = 32
TITLE = "So_Long"
DEFAULT_SPRITE_DIR = Path("textures")

SPRITE_FILES = {
    "ground": "ground.xpm",
    "wall": "wall.xpm",
    "door_open": "door_open.xpm",
    "door_close": "door_close.xpm",
    "potion": "potion.xpm",
    "player": "player.xpm",
}

_DRAW_ORDER = (WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT)

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for index, value in enumerate(image.pixels):
        y, x = divmod(index, image.width)
        if value == TRANSPARENT:
            color = (0, 0, 0, 0)
        else:
            color = ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)
        surface.set_at((x, y), color)
    return surface


@dataclass
class SpriteSet:
    """The images drawn for each kind of tile."""

    ground: pygame.Surface
    wall: pygame.Surface
    door_open: pygame.Surface
    door_close: pygame.Surface
    potion: pygame.Surface
    player: pygame.Surface

    @classmethod
    def load(cls, directory: str | Path) -> SpriteSet:
        """Load every sprite from XPM files in ``directory``."""
        base = Path(directory)
        surfaces = {
            name: _to_surface(read_xpm_file(base / filename))
            for name, filename in SPRITE_FILES.items()
        }
        return cls(**surfaces)

    def for_tile(self, tile: str, door_open: bool) -> pygame.Surface | None:
        """Return the sprite for ``tile``, or None for tiles that are not drawn."""
        if tile == EXIT:
            return self.door_open if door_open else self.door_close
        return {
            WALL: self.wall,
            FLOOR: self.ground,
            PLAYER: self.player,
            COLLECTIBLE: self.potion,
        }.get(tile)


def render(surface: pygame.Surface, game: Game, sprites: SpriteSet) -> None:
    """Draw every tile of the game onto ``surface``."""
    door_open = game.door_open()
    cells = list(game.tiles())
    for tile in _DRAW_ORDER:
        sprite = sprites.for_tile(tile, door_open)
        for position, value in cells:
            if value == tile:
                surface.blit(sprite, (position.x * SPRITE_SIZE, position.y * SPRITE_SIZE))


def key_to_direction(key: int) -> Direction | None:
    """Map a pygame key code to a direction, or None."""
    return _KEY_DIRECTIONS.get(key)


def run(map_path: str | Path, sprite_dir: str | Path = DEFAULT_SPRITE_DIR) -> int:
    """Load and check the map, then play it in a window until it ends."""
    game_map = GameMap.from_file(map_path)
    check_map(game_map)
    game = Game(game_map)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game_map.width * SPRITE_SIZE, game_map.height * SPRITE_SIZE)
        )
        pygame.display.set_caption(TITLE)
        sprites = SpriteSet.load(sprite_dir)
        clock = pygame.time.Clock()
        while not game.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    game.handle_key("escape")
                    return 0
                if event.type == pygame.KEYUP:
                    direction = key_to_direction(event.key)
                    if direction is not None and game.move(direction) is MoveResult.MOVED:
                        print(f"moves : {game.moves}")
            if game.finished:
                break
            render(screen, game, sprites)
            pygame.display.flip()
            clock.tick(60)
        return 0
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: takes the path of a map file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Enter the path of the map only", file=sys.stderr)
        return 1
    try:
        return run(args[0])
    except MapError as exc:
        print(f"\033[31m{exc}\033[0m", file=sys.stderr)
        return 1
    except XpmError as exc:
        print(f"Error loading image: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
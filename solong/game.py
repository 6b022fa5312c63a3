"""Game state and the rules for moving the player."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError, Position


class Direction(Enum):
    """A step on the grid as a (dx, dy) offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, position: Position) -> Position:
        """Return the neighbour of ``position`` in this direction."""
        return Position(position.x + self.dx, position.y + self.dy)


class MoveResult(Enum):
    """What a key press or move did to the game."""

    BLOCKED = auto()
    MOVED = auto()
    COLLECTED = auto()
    EXIT_LOCKED = auto()
    WON = auto()
    QUIT = auto()
    IGNORED = auto()


_KEY_NAMES: dict[str, Direction] = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}

QUIT_KEY = "escape"


@dataclass
class Game:
    """A running game: the map, the move counter and whether it is over."""

    game_map: GameMap
    moves: int = 0
    finished: bool = False

    def __post_init__(self) -> None:
        if self.game_map.player is None:
            raise MapError("map has no player")

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one cell in ``direction``.

        Stepping on a collectible picks it up without counting a move;
        the exit ends the game only once every collectible is gone.
        """
        if self.finished:
            return MoveResult.IGNORED
        game_map = self.game_map
        game_map.refresh()
        player = game_map.player
        if player is None:
            raise MapError("map has no player")
        target = direction.step(player)
        try:
            destination = game_map.tile(target)
        except IndexError:
            return MoveResult.BLOCKED
        if destination == WALL:
            return MoveResult.BLOCKED
        if destination == COLLECTIBLE:
            game_map.set_tile(player, FLOOR)
            game_map.set_tile(target, PLAYER)
            game_map.refresh()
            return MoveResult.COLLECTED
        if destination == EXIT:
            if game_map.potions_count == 0:
                self.finished = True
                return MoveResult.WON
            return MoveResult.EXIT_LOCKED
        game_map.set_tile(target, game_map.tile(player))
        game_map.set_tile(player, destination)
        self.moves += 1
        game_map.refresh()
        return MoveResult.MOVED

    def handle_key(self, key: str) -> MoveResult:
        """Act on a key given by name: w/a/s/d, arrow names or escape."""
        name = key.lower()
        if name == QUIT_KEY:
            self.finished = True
            return MoveResult.QUIT
        direction = _KEY_NAMES.get(name)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(direction)

    def door_open(self) -> bool:
        """Tell whether every collectible has been picked up."""
        return self.game_map.potions_count == 0

    def tiles(self) -> Iterator[tuple[Position, str]]:
        """Yield every cell with its tile, in reading order."""
        for y, row in enumerate(self.game_map.rows):
            for x, value in enumerate(row):
                yield Position(x, y), value
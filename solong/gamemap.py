"""Game map loading, bookkeeping and validation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"


class MapError(ValueError):
    """Raised when a map cannot be loaded or is not playable."""


@dataclass(frozen=True)
class Position:
    """A cell on the map: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


@dataclass
class GameMap:
    """A grid of tiles plus the facts derived from it.

    ``width`` is the length of the last row, ``height`` the number of rows,
    ``player`` the last 'P' found in reading order and ``potions_count`` the
    number of collectibles left on the grid.
    """

    rows: list[list[str]]
    width: int = field(init=False, default=0)
    height: int = field(init=False, default=0)
    player: Position | None = field(init=False, default=None)
    potions_count: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]
        self.refresh()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from text lines, dropping one trailing newline each."""
        rows = [line[:-1] if line.endswith("\n") else line for line in lines]
        if not rows:
            raise MapError("empty map")
        return cls([list(row) for row in rows])

    @classmethod
    def from_file(cls, path: str | Path) -> GameMap:
        """Read a map file, one row per line."""
        try:
            text = Path(path).read_text()
        except (OSError, UnicodeDecodeError) as exc:
            raise MapError(f"cannot read map {path}: {exc}") from exc
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls.from_lines(lines)

    def refresh(self) -> None:
        """Recompute size, player position and collectible count."""
        self.height = len(self.rows)
        self.width = len(self.rows[-1]) if self.rows else 0
        self.potions_count = sum(row.count(COLLECTIBLE) for row in self.rows)
        players = list(self.positions_of(PLAYER))
        self.player = players[-1] if players else None

    def _check_bounds(self, position: Position) -> None:
        if not (0 <= position.y < self.height and 0 <= position.x < len(self.rows[position.y])):
            raise IndexError(f"position ({position.x}, {position.y}) is outside the map")

    def tile(self, position: Position) -> str:
        """Return the tile at ``position``."""
        self._check_bounds(position)
        return self.rows[position.y][position.x]

    def set_tile(self, position: Position, value: str) -> None:
        """Replace the tile at ``position``; derived facts are not refreshed."""
        if len(value) != 1:
            raise ValueError("a tile is a single character")
        self._check_bounds(position)
        self.rows[position.y][position.x] = value

    def copy_rows(self) -> list[list[str]]:
        """Return an independent copy of the grid."""
        return [list(row) for row in self.rows]

    def positions_of(self, tile: str) -> Iterator[Position]:
        """Yield every position holding ``tile``, in reading order."""
        for y, row in enumerate(self.rows):
            for x, value in enumerate(row):
                if value == tile:
                    yield Position(x, y)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def count_players(game_map: GameMap) -> int:
    """Return how many player tiles the map holds."""
    return sum(row.count(PLAYER) for row in game_map.rows)


def is_rectangular(game_map: GameMap) -> bool:
    """Tell whether every row has the length of the first one."""
    if not game_map.rows:
        return False
    size = len(game_map.rows[0])
    return all(len(row) == size for row in game_map.rows)


def has_border_walls(game_map: GameMap) -> bool:
    """Tell whether every cell on the map's edge is a wall."""
    last_row = game_map.height - 1
    last_col = game_map.width - 1
    for y, row in enumerate(game_map.rows):
        for x, value in enumerate(row):
            on_edge = y in (0, last_row) or x in (0, last_col)
            if on_edge and value != WALL:
                return False
    return True


def flood_fill(game_map: GameMap) -> tuple[int, bool]:
    """Explore from the player through non-wall tiles.

    Returns the number of collectibles reached and whether an exit was
    reached. The map itself is left untouched.
    """
    if game_map.player is None:
        raise MapError("map has no player")
    grid = game_map.copy_rows()
    collected = 0
    exit_found = False
    stack = [(game_map.player.y, game_map.player.x)]
    while stack:
        row, col = stack.pop()
        if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
            continue
        value = grid[row][col]
        if value in (WALL, "f"):
            continue
        if value == COLLECTIBLE:
            collected += 1
        elif value == EXIT:
            exit_found = True
        grid[row][col] = "f"
        stack.extend(
            [(row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)]
        )
    return collected, exit_found


def check_map(game_map: GameMap) -> None:
    """Raise MapError unless the map is playable."""
    if (
        count_players(game_map) != 1
        or not is_rectangular(game_map)
        or not has_border_walls(game_map)
    ):
        raise MapError("Error by map")
    collected, exit_found = flood_fill(game_map)
    if collected != game_map.potions_count or not exit_found:
        raise MapError("Error by map (flood fill)")
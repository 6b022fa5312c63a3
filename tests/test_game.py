import pytest

from solong.game import Direction, Game, MoveResult
from solong.gamemap import GameMap, MapError, Position


def make_game(*rows):
    return Game(GameMap.from_lines(rows))


def test_move_onto_floor_counts_move_and_swaps():
    game = make_game("111111", "1P0CE1", "111111")
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.moves == 1
    assert game.game_map.player == Position(2, 1)
    assert game.game_map.tile(Position(1, 1)) == "0"


def test_wall_blocks():
    game = make_game("111111", "1P0CE1", "111111")
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.moves == 0
    assert game.game_map.player == Position(1, 1)


def test_collect_does_not_count_move():
    game = make_game("11111", "1PCE1", "11111")
    assert game.move(Direction.RIGHT) is MoveResult.COLLECTED
    assert game.moves == 0
    assert game.game_map.potions_count == 0
    assert game.door_open()
    assert game.game_map.player == Position(2, 1)


def test_exit_locked_while_potions_left():
    game = make_game("11111", "1PEC1", "11111")
    assert not game.door_open()
    assert game.move(Direction.RIGHT) is MoveResult.EXIT_LOCKED
    assert game.game_map.player == Position(1, 1)
    assert not game.finished


def test_exit_wins_after_collecting():
    game = make_game("11111", "1PCE1", "11111")
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert game.finished
    assert game.move(Direction.LEFT) is MoveResult.IGNORED


def test_handle_key_names():
    game = make_game("111111", "1P0CE1", "111111")
    assert game.handle_key("D") is MoveResult.MOVED
    assert game.handle_key("left") is MoveResult.MOVED
    assert game.game_map.player == Position(1, 1)
    assert game.handle_key("x") is MoveResult.IGNORED


def test_escape_quits():
    game = make_game("111", "1P1", "111")
    assert game.handle_key("escape") is MoveResult.QUIT
    assert game.finished


def test_tiles_cover_grid():
    rows = ("111", "1P1", "111")
    game = make_game(*rows)
    cells = list(game.tiles())
    assert "".join(tile for _, tile in cells) == "".join(rows)
    assert cells[4] == (Position(1, 1), "P")


def test_direction_step():
    assert Direction.DOWN.step(Position(2, 2)) == Position(2, 3)
    assert Direction.LEFT.step(Position(2, 2)) == Position(1, 2)


def test_game_requires_player():
    with pytest.raises(MapError):
        make_game("111", "101", "111")
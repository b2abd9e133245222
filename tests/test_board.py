import io
import random

import pytest

from pokegame.board import Board
from pokegame.enums import Color, Direction
from pokegame.poke import Poke


def make_board():
    return Board(32, 15, random.Random(7))


def test_create_board_dimensions():
    board = make_board()
    assert board.width == 32
    assert board.height == 15
    assert len(board.pokes) == 0


@pytest.mark.parametrize("width,height", [(0, 0), (0, 15), (32, 0)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(ValueError):
        Board(width, height)


def test_move_player_each_direction():
    board = make_board()
    player = board.player
    board.move_player(Direction.RIGHT)
    assert (player.x, player.y) == (1, 0)
    board.move_player(Direction.DOWN)
    assert (player.x, player.y) == (1, 1)
    board.move_player(Direction.UP)
    assert (player.x, player.y) == (1, 0)
    board.move_player(Direction.LEFT)
    assert (player.x, player.y) == (0, 0)


def test_move_player_stays_within_edges():
    board = make_board()
    player = board.player
    board.move_player(Direction.LEFT)
    assert (player.x, player.y) == (0, 0)
    board.move_player(Direction.UP)
    assert (player.x, player.y) == (0, 0)
    for _ in range(33):
        board.move_player(Direction.RIGHT)
    assert (player.x, player.y) == (31, 0)
    for _ in range(16):
        board.move_player(Direction.DOWN)
    assert (player.x, player.y) == (31, 14)


def test_blocked_move_is_still_remembered():
    board = make_board()
    board.move_player(Direction.LEFT)
    assert board.player.last_move is Direction.LEFT


def test_move_poke_pattern_nse():
    board = make_board()
    poke = Poke("Charmander", 50, Color.RED, "NSE", 5, 5)
    board.pokes.add(poke)
    board.move_pokes()
    assert poke.y == 5
    assert poke.x == 6


def test_move_poke_pattern_at_corner():
    board = make_board()
    poke = Poke("Eevee", 100, Color.YELLOW, "NSEO", 0, 0)
    board.pokes.add(poke)
    board.move_pokes()
    assert (poke.x, poke.y) == (0, 1)


def test_random_pattern_stays_on_board():
    board = make_board()
    poke = Poke("Pikachu", 120, Color.YELLOW, "RR", 31, 14)
    board.pokes.add(poke)
    for _ in range(50):
        board.move_pokes()
        assert 0 <= poke.x <= 31
        assert 0 <= poke.y <= 14


def test_mirror_and_inverse_follow_last_move():
    board = make_board()
    mirror = Poke("Mew", 10, Color.PINK, "J", 5, 5)
    inverse = Poke("Ditto", 10, Color.PINK, "I", 5, 5)
    board.pokes.add(mirror)
    board.pokes.add(inverse)
    board.move_player(Direction.RIGHT)
    board.move_pokes()
    assert (mirror.x, mirror.y) == (5 + 1, 5)
    assert (inverse.x, inverse.y) == (5 - 1, 5)


def test_unknown_pattern_letters_are_ignored():
    board = make_board()
    poke = Poke("Onix", 10, Color.GREEN, "xyz", 3, 3)
    board.pokes.add(poke)
    board.move_pokes()
    assert (poke.x, poke.y) == (3, 3)


def test_capture_same_cell():
    board = make_board()
    player = board.player
    poke = Poke("Bulbasaur", 75, Color.GREEN, "R", player.x, player.y)
    board.pokes.add(poke)
    assert board.is_captured(poke)


def test_no_capture_on_other_cell():
    board = make_board()
    poke = Poke("Charmander", 75, Color.RED, "S", 1, 1)
    board.pokes.add(poke)
    assert not board.is_captured(poke)


def test_render_shape_and_contents():
    board = make_board()
    board.pokes.add(Poke("Zapdos", 500, Color.YELLOW, "N", 4, 4))
    text = board.render()
    assert "🧍" in text
    assert "Puntos: " in text
    assert Poke("Zapdos", 500, Color.YELLOW, "N").colored_initial() in text
    assert text.count("\n") == 7 + board.height + 2


def test_show_writes_render():
    board = make_board()
    out = io.StringIO()
    board.show(out)
    assert out.getvalue() == board.render()
import pytest

from pokegame.enums import (
    Color,
    Direction,
    Key,
    Pattern,
    color_from_name,
    key_to_direction,
)


@pytest.mark.parametrize(
    "code, direction",
    [(256, Direction.UP), (257, Direction.DOWN), (258, Direction.LEFT), (259, Direction.RIGHT)],
)
def test_raw_engine_codes_map_to_directions(code, direction):
    assert key_to_direction(code) is direction


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_an_involution(direction):
    opposite = Direction.opposite(direction)
    assert Direction.opposite(opposite) is direction
    assert opposite is not direction


def test_opposite_pairs():
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.RIGHT.opposite() is Direction.LEFT


@pytest.mark.parametrize(
    "letter, direction",
    [("N", Direction.UP), ("S", Direction.DOWN), ("E", Direction.RIGHT), ("O", Direction.LEFT)],
)
def test_cardinal_patterns(letter, direction):
    assert Pattern(letter).direction() is direction


@pytest.mark.parametrize("pattern", [Pattern.MIRROR, Pattern.INVERSE, Pattern.RANDOM])
def test_non_cardinal_pattern_has_no_direction(pattern):
    with pytest.raises(ValueError):
        Pattern.direction(pattern)


def test_pattern_letters():
    assert Pattern("J") is Pattern.MIRROR
    assert Pattern("I") is Pattern.INVERSE
    assert Pattern("R") is Pattern.RANDOM


def test_unknown_pattern_letter():
    with pytest.raises(ValueError):
        Pattern("X")


@pytest.mark.parametrize(
    "color, label",
    [
        (Color.BLUE, "Azul"),
        (Color.YELLOW, "Amarillo"),
        (Color.MAGENTA, "Magenta"),
        (Color.GREEN, "Verde"),
        (Color.PINK, "Rosa"),
        (Color.RED, "Verde"),
    ],
)
def test_color_labels(color, label):
    assert Color.label(color) == label


@pytest.mark.parametrize(
    "name, color",
    [
        ("AMARILLO", Color.YELLOW),
        ("ROJO", Color.RED),
        ("AZUL", Color.BLUE),
        ("MAGENTA", Color.MAGENTA),
        ("VERDE", Color.GREEN),
    ],
)
def test_color_from_name(name, color):
    assert color_from_name(name) is color


@pytest.mark.parametrize("name", ["amarillo", "ROSA", "", "ROJO "])
def test_color_from_name_rejects_unknown(name):
    with pytest.raises(ValueError):
        color_from_name(name)


def test_key_to_direction_for_arrows():
    assert key_to_direction(Key.UP) is Direction.UP
    assert key_to_direction(Key.DOWN) is Direction.DOWN
    assert key_to_direction(Key.LEFT) is Direction.LEFT
    assert key_to_direction(Key.RIGHT) is Direction.RIGHT


@pytest.mark.parametrize("key", [0, -1, 9999, ord("x"), ord("q")])
def test_key_to_direction_for_other_keys(key):
    assert key_to_direction(key) is None
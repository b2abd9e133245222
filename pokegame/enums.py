"""Keys, movement directions, movement patterns and colours."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pokegame.engine import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

WIDTH = 32
HEIGHT = 15


class Key(IntEnum):
    """Arrow key codes as produced by the terminal engine."""

    UP = KEY_UP
    DOWN = KEY_DOWN
    LEFT = KEY_LEFT
    RIGHT = KEY_RIGHT


class Direction(Enum):
    """A step on the board."""

    UP = 0
    DOWN = 1
    RIGHT = 2
    LEFT = 3

    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
}


class Pattern(Enum):
    """One letter of a pokemon's movement pattern."""

    UP = "N"
    DOWN = "S"
    RIGHT = "E"
    LEFT = "O"
    MIRROR = "J"
    INVERSE = "I"
    RANDOM = "R"

    def direction(self) -> Direction:
        """The fixed direction of a cardinal pattern letter."""
        try:
            return _PATTERN_DIRECTIONS[self]
        except KeyError:
            raise ValueError(f"pattern {self.value!r} has no fixed direction") from None


_PATTERN_DIRECTIONS = {
    Pattern.UP: Direction.UP,
    Pattern.DOWN: Direction.DOWN,
    Pattern.RIGHT: Direction.RIGHT,
    Pattern.LEFT: Direction.LEFT,
}


class Color(Enum):
    """Colour of a pokemon."""

    RED = 0
    BLUE = 1
    PINK = 2
    YELLOW = 3
    MAGENTA = 4
    GREEN = 5

    def label(self) -> str:
        """Display name of the colour."""
        return _LABELS[self]


# Red is listed under the green label.
_LABELS = {
    Color.BLUE: "Azul",
    Color.YELLOW: "Amarillo",
    Color.MAGENTA: "Magenta",
    Color.GREEN: "Verde",
    Color.RED: "Verde",
    Color.PINK: "Rosa",
}

_COLOR_NAMES = {
    "AMARILLO": Color.YELLOW,
    "ROJO": Color.RED,
    "AZUL": Color.BLUE,
    "MAGENTA": Color.MAGENTA,
    "VERDE": Color.GREEN,
}


def color_from_name(name: str) -> Color:
    """Parse a colour name as written in the pokedex file."""
    try:
        return _COLOR_NAMES[name]
    except KeyError:
        raise ValueError(f"unknown colour: {name!r}") from None


_KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.RIGHT: Direction.RIGHT,
    Key.LEFT: Direction.LEFT,
}


def key_to_direction(key: int) -> Optional[Direction]:
    """The direction an arrow key stands for, or None for any other key."""
    try:
        return _KEY_DIRECTIONS[Key(key)]
    except ValueError:
        return None
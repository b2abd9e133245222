"""Pokemon on the board: name, score, colour, movement pattern and position."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Optional, Union

from pokegame.csv_reader import CsvReader, parse_int, parse_str
from pokegame.engine import (
    ANSI_COLOR_BLUE,
    ANSI_COLOR_GREEN,
    ANSI_COLOR_MAGENTA,
    ANSI_COLOR_RED,
    ANSI_COLOR_YELLOW,
)
from pokegame.enums import HEIGHT, WIDTH, Color, color_from_name

RandomSource = Union[random.Random, None]

_COLUMNS = (parse_str, parse_int, parse_str, parse_str)

_ANSI_BY_COLOR = {
    Color.BLUE: ANSI_COLOR_BLUE,
    Color.YELLOW: ANSI_COLOR_YELLOW,
    Color.MAGENTA: ANSI_COLOR_MAGENTA,
    Color.GREEN: ANSI_COLOR_GREEN,
    Color.RED: ANSI_COLOR_RED,
    Color.PINK: ANSI_COLOR_MAGENTA,
}


@dataclass
class Poke:
    """A pokemon. ``color`` is None when the source data named no known colour."""

    name: str
    points: int
    color: Optional[Color]
    pattern: str
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(
        cls,
        name: str,
        points: int,
        color: Optional[Color],
        pattern: str,
        rng: RandomSource = None,
    ) -> "Poke":
        """Create a pokemon at a random cell of the standard board."""
        source = rng if rng is not None else random
        x = source.randrange(WIDTH)
        y = source.randrange(HEIGHT)
        return cls(name, points, color, pattern, x, y)

    def copy(self) -> "Poke":
        """An independent copy, position included."""
        return replace(self)

    def colored_initial(self) -> str:
        """The first letter of the name preceded by the colour's ANSI code."""
        return _ANSI_BY_COLOR.get(self.color, "") + self.name[:1]

    def describe(self) -> str:
        """One line describing the pokemon, without a line break."""
        label = self.color.label() if self.color is not None else ""
        return (
            f"Nombre: {self.name} Puntos: {self.points} "
            f"Color: {label} Patron: {self.pattern}"
        )


def read_poke(reader: CsvReader, rng: RandomSource = None) -> Optional[Poke]:
    """Read the next pokemon from ``reader``.

    Returns None at end of file or when the line does not hold the four
    columns name, points, colour and pattern.
    """
    values = reader.read_line(_COLUMNS)
    if values is None or len(values) != len(_COLUMNS):
        return None
    name, points, color_name, pattern = values
    try:
        color: Optional[Color] = color_from_name(color_name)
    except ValueError:
        color = None
    return Poke.spawn(name, points, color, pattern, rng)
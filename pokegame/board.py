"""The playing field: the player, the wild pokemon and how they move."""

from __future__ import annotations

import random
import sys
from typing import List, Optional, TextIO, Tuple

from pokegame.engine import (
    ANSI_COLOR_BOLD,
    ANSI_COLOR_CYAN,
    ANSI_COLOR_GREEN,
    ANSI_COLOR_MAGENTA,
    ANSI_COLOR_RESET,
    ANSI_COLOR_WHITE,
    ANSI_COLOR_YELLOW,
)
from pokegame.enums import HEIGHT, WIDTH, Direction, Pattern
from pokegame.player import Player
from pokegame.poke import Poke, RandomSource
from pokegame.pokedex import Pokedex

_FRAME = ANSI_COLOR_WHITE + ANSI_COLOR_BOLD
_PLAYER_CELL = ANSI_COLOR_MAGENTA + ANSI_COLOR_BOLD + "🧍"
_EMPTY_CELL = " "


class Board:
    """A grid holding the player and the pokemon roaming on it."""

    def __init__(
        self, width: int = WIDTH, height: int = HEIGHT, rng: RandomSource = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid board size {width}x{height}")
        self.width = width
        self.height = height
        self.player = Player()
        self.pokes = Pokedex()
        self._rng = rng if rng is not None else random

    def _in_range(self, x: int, y: int, direction: Direction) -> bool:
        if direction is Direction.UP:
            return y > 0
        if direction is Direction.DOWN:
            return y < self.height - 1
        if direction is Direction.RIGHT:
            return x < self.width - 1
        if direction is Direction.LEFT:
            return x > 0
        return False

    @staticmethod
    def _stepped(x: int, y: int, direction: Direction) -> Tuple[int, int]:
        if direction is Direction.UP:
            return x, y - 1
        if direction is Direction.DOWN:
            return x, y + 1
        if direction is Direction.RIGHT:
            return x + 1, y
        return x - 1, y

    def move_player(self, direction: Direction) -> None:
        """Move the player one cell if the board allows it.

        The direction is remembered as the last move either way.
        """
        player = self.player
        if self._in_range(player.x, player.y, direction):
            player.x, player.y = self._stepped(player.x, player.y, direction)
        player.last_move = direction

    def _move_poke(self, poke: Poke, direction: Direction) -> None:
        if self._in_range(poke.x, poke.y, direction):
            poke.x, poke.y = self._stepped(poke.x, poke.y, direction)

    def _move_random(self, poke: Poke) -> None:
        if not any(self._in_range(poke.x, poke.y, d) for d in Direction):
            return
        while True:
            direction = Direction(self._rng.randrange(len(Direction)))
            if self._in_range(poke.x, poke.y, direction):
                poke.x, poke.y = self._stepped(poke.x, poke.y, direction)
                return

    def move_pokes(self) -> None:
        """Move every pokemon through each letter of its pattern.

        Steps that would leave the board and unknown letters are skipped.
        """
        last_move = self.player.last_move
        for poke in self.pokes:
            for letter in poke.pattern:
                try:
                    pattern = Pattern(letter)
                except ValueError:
                    continue
                if pattern is Pattern.RANDOM:
                    self._move_random(poke)
                elif pattern is Pattern.MIRROR:
                    self._move_poke(poke, last_move)
                elif pattern is Pattern.INVERSE:
                    self._move_poke(poke, last_move.opposite())
                else:
                    self._move_poke(poke, pattern.direction())

    def is_captured(self, poke: Poke) -> bool:
        """Whether ``poke`` stands on the player's cell."""
        return self.player.x == poke.x and self.player.y == poke.y

    def _cells(self) -> List[List[str]]:
        cells = [[_EMPTY_CELL] * self.width for _ in range(self.height)]
        cells[self.player.y][self.player.x] = _PLAYER_CELL
        for poke in self.pokes:
            if 0 <= poke.x < self.width and 0 <= poke.y < self.height:
                cells[poke.y][poke.x] = poke.colored_initial()
        return cells

    def _stats(self) -> str:
        player = self.player
        last_name = player.last_captured.name if player.last_captured else ""
        return "".join(
            [
                f"{_FRAME}╔{'═' * 58}╗\n",
                f"{_FRAME}║   {ANSI_COLOR_GREEN}Estadísticas: {_FRAME:<50}║\n",
                f"{_FRAME}║   {ANSI_COLOR_GREEN}Puntos: {player.points:<47}{_FRAME}║\n",
                f"{_FRAME}║   {ANSI_COLOR_YELLOW}Multiplicador: "
                f"{player.multiplier:<40}{_FRAME}║\n",
                f"{_FRAME}║   {ANSI_COLOR_CYAN}Nro de atrapados en combo: "
                f"{player.combo:<28}{_FRAME}║\n",
                f"{_FRAME}║   {ANSI_COLOR_CYAN}Ultimo Atrapado: {last_name:<38}{_FRAME}║\n",
                f"{_FRAME}╚{'═' * 58}╝\n",
            ]
        )

    def render(self) -> str:
        """The statistics panel followed by the framed grid."""
        border = _FRAME + "+" + (_FRAME + "--") * self.width + _FRAME + "+\n"
        rows = [
            _FRAME
            + "|"
            + "".join(f"{ANSI_COLOR_RESET}{cell} " for cell in row)
            + _FRAME
            + "|\n"
            for row in self._cells()
        ]
        return self._stats() + border + "".join(rows) + border

    def show(self, out: Optional[TextIO] = None) -> None:
        """Write the rendered board."""
        (out if out is not None else sys.stdout).write(self.render())
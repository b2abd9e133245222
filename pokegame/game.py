"""A round of the game: the board, the pokemon pool and the scoring rules."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from pokegame.board import Board
from pokegame.csv_reader import CsvReader
from pokegame.engine import ANSI_COLOR_CYAN, ANSI_COLOR_MAGENTA
from pokegame.enums import HEIGHT, WIDTH, key_to_direction
from pokegame.poke import Poke, RandomSource
from pokegame.pokedex import Pokedex

POKES_ON_BOARD = 7


@dataclass(frozen=True)
class GameResults:
    """Final statistics of a round."""

    points: int
    max_multiplier: int
    max_combo: int
    best_chain: List[str]


class Game:
    """Holds the board, the pool of pokemon and the round's start time."""

    def __init__(self, rng: RandomSource = None) -> None:
        self._rng = rng if rng is not None else random
        self.board = Board(WIDTH, HEIGHT, rng)
        self.pokedex = Pokedex()
        self.start_time = time.time()

    def start(self, reader: Optional[CsvReader]) -> bool:
        """Load the pool from ``reader`` and place up to seven pokemon.

        Returns False, leaving the board untouched, if nothing could be read.
        """
        if not self.pokedex.load_from(reader, self._rng):
            return False
        for _ in range(min(POKES_ON_BOARD, len(self.pokedex))):
            self.pokedex.add_random(self.board.pokes, self._rng)
        return True

    def step(self, key: int) -> None:
        """Apply one key press, resolve captures and draw the board."""
        direction = key_to_direction(key)
        if direction is not None:
            self.board.move_player(direction)
            self.board.move_pokes()
        self._check_captures()
        self.board.show(sys.stdout)

    def _check_captures(self) -> None:
        pokes = self.board.pokes
        index = 0
        while index < len(pokes):
            poke = pokes[index]
            if not self.board.is_captured(poke):
                index += 1
                continue
            pokes.remove_at(index)
            self._record_capture(poke)
            if len(self.pokedex):
                self.pokedex.add_random(pokes, self._rng)

    def _record_capture(self, poke: Poke) -> None:
        player = self.board.player
        last = player.last_captured
        chained = (
            last is None
            or last.name[:1] == poke.name[:1]
            or last.color == poke.color
        )
        if chained:
            player.multiplier += 1
            player.combo += 1
            player.caught.add(poke.copy())
            if player.combo > player.max_combo:
                player.max_combo = player.combo
                player.best_chain = player.caught.copy()
        else:
            player.caught.clear()
            player.combo = 0
            player.multiplier = 1

        player.max_multiplier = max(player.max_multiplier, player.multiplier)
        player.points += player.multiplier * poke.points
        player.last_captured = poke.copy()

    def results(self) -> GameResults:
        """The round's statistics."""
        player = self.board.player
        return GameResults(
            points=player.points,
            max_multiplier=player.max_multiplier,
            max_combo=player.max_combo,
            best_chain=[poke.name for poke in player.best_chain.sorted_by_name()],
        )

    def show_results(self, out: Optional[TextIO] = None) -> None:
        """Write the round's statistics."""
        stream = out if out is not None else sys.stdout
        player = self.board.player
        stream.write(f"{ANSI_COLOR_CYAN}Puntaje alcanzado: {player.points}\n")
        stream.write(f"{ANSI_COLOR_MAGENTA}Máximo multiplicador: {player.max_multiplier}\n")
        stream.write(f"{ANSI_COLOR_CYAN}Máximo cantidad de combo: {player.max_combo}\n")
        stream.write(f"{ANSI_COLOR_MAGENTA}Cadena mas larga: \n")
        player.best_chain.print_names(stream)
        stream.write("\n")
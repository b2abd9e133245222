"""The player's position and scoring state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pokegame.enums import Direction
from pokegame.poke import Poke
from pokegame.pokedex import Pokedex


@dataclass
class Player:
    """Position, last move, captures and score of the player."""

    last_captured: Optional[Poke] = None
    last_move: Direction = Direction.UP
    caught: Pokedex = field(default_factory=Pokedex)
    best_chain: Pokedex = field(default_factory=Pokedex)
    max_combo: int = 0
    combo: int = 0
    max_multiplier: int = 1
    multiplier: int = 0
    points: int = 0
    iterations: int = 0
    x: int = 0
    y: int = 0
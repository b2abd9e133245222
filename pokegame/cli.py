"""Command entry point: the main menu and the actions it offers."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, TextIO

from pokegame.csv_reader import CsvReader, parse_int
from pokegame.engine import (
    ANSI_COLOR_CYAN,
    ANSI_COLOR_MAGENTA,
    ANSI_COLOR_WHITE,
    clear_screen,
    game_loop,
    hide_cursor,
    show_cursor,
)
from pokegame.game import Game
from pokegame.menu import Menu
from pokegame.pokedex import Pokedex

TIME_LIMIT = 60
EXIT_ERROR = 1

_LOGO = (
    "  _____      _                             \n"
    " |  __ \\    | |                            \n"
    " | |__) |__ | | _____ _ __ ___   ___  _ __ \n"
    " |  ___/ _ \\| |/ / _ \\ '_ ` _ \\ / _ \\| '_ \\ \n"
    " | |  | (_) |   <  __/ | | | | | (_) | | | |\n"
    " |_|   \\___/|_|\\_\\___|_| |_| |_|\\___/|_| |_|\n"
)

Loop = Callable[[Callable[[int], object]], None]


@dataclass
class ActionContext:
    """What the menu actions work with.

    ``rng`` should be the random source the game was built with, so that
    seeding it makes a round reproducible. ``loop`` drives the round.
    """

    game: Game
    reader: Optional[CsvReader]
    rng: random.Random = field(default_factory=random.Random)
    out: Optional[TextIO] = None
    input: Optional[TextIO] = None
    loop: Loop = game_loop

    @property
    def stdout(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    @property
    def stdin(self) -> TextIO:
        return self.input if self.input is not None else sys.stdin


def build_menu(menu: Menu) -> None:
    """Register the main menu's options."""
    menu.add("P", "Mostrar Pokedex", show_pokedex)
    menu.add("J", "Jugar", play)
    menu.add("S", "Jugar con Semilla", play_with_seed)
    menu.add("Q", "Salir", quit_game)


def show_pokedex(ctx: ActionContext) -> bool:
    """Load the pokedex from the file and list it by name."""
    pokedex = Pokedex()
    pokedex.load_from(ctx.reader, ctx.rng)
    pokedex.print_all(ctx.stdout)
    return False


def _run_round(ctx: ActionContext) -> None:
    game = ctx.game
    game.start(ctx.reader)
    ctx.loop(lambda key: tick(key, game))
    game.show_results(ctx.stdout)


def play(ctx: ActionContext) -> bool:
    """Play a round seeded with the current time."""
    ctx.rng.seed(int(time.time()))
    _run_round(ctx)
    return True


def _read_seed(stream: TextIO) -> Optional[int]:
    while True:
        line = stream.readline()
        if not line:
            return None
        if line.strip():
            try:
                return parse_int(line)
            except ValueError:
                return None


def play_with_seed(ctx: ActionContext) -> bool:
    """Ask for a seed and play a round with it.

    Returns False, without playing, if no seed could be read.
    """
    out = ctx.stdout
    out.write("Ingrese una semilla: ")
    out.flush()
    seed = _read_seed(ctx.stdin)
    if seed is None:
        return False
    ctx.rng.seed(seed)
    _run_round(ctx)
    return False


def quit_game(ctx: ActionContext) -> bool:
    """Say goodbye."""
    ctx.stdout.write("Saliendo...\n")
    return True


def tick(key: int, game: Game) -> bool:
    """One frame of the round; True when the round should end."""
    clear_screen()
    game.step(key)
    hide_cursor()
    timed_out = time.time() - game.start_time >= TIME_LIMIT
    return key in (ord("q"), ord("Q")) or timed_out


def welcome(out: Optional[TextIO] = None) -> None:
    """Write the logo and the greeting."""
    stream = out if out is not None else sys.stdout
    stream.write(ANSI_COLOR_MAGENTA)
    stream.write(_LOGO)
    stream.write(ANSI_COLOR_WHITE)
    stream.write("Bienvenido al juego de Pokemon, selecciona una opcion\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the pokedex file named by the single argument."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 1:
        out.write("Uso: pokegame <archivo.csv>\n")
        return EXIT_ERROR
    try:
        reader = CsvReader(args[0], ",")
    except OSError:
        out.write("Archivo inexistente\n")
        return EXIT_ERROR

    with reader:
        welcome(out)
        menu = Menu()
        build_menu(menu)
        out.write(ANSI_COLOR_CYAN)
        menu.show(out)
        out.write(ANSI_COLOR_WHITE)

        rng = random.Random()
        game = Game(rng)
        ctx = ActionContext(game=game, reader=reader, rng=rng)

        choice = sys.stdin.read(1).upper()
        menu.run(choice, ctx)
        out.write(ANSI_COLOR_WHITE)
        show_cursor(out)
    return 0
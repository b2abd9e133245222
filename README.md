# pokegame

A small terminal arcade game. Pokemon are loaded from a CSV pokedex and
placed at random on a 32 x 15 board. Move with the arrow keys and step on a
pokemon to capture it. Every time you move, each pokemon on the board moves
according to its own pattern. The game's own messages are in Spanish.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. Playing a round
needs a POSIX terminal: the input loop switches stdin to non-canonical,
non-echoing, non-blocking mode for the length of the round, and raises
`OSError` where `termios` and `fcntl` are not available.

## Running

```
pokegame path/to/pokedex.csv
```

Without exactly one argument the command prints a usage line and exits with
status 1. If the file cannot be opened it prints `Archivo inexistente` and
exits with status 1.

A logo and the menu are shown; type the letter of an option (upper or lower
case) and press Enter:

- `P` – print the pokedex, one line per pokemon, sorted by name
- `J` – play a round seeded with the current time
- `S` – type a seed, then play a round with it
- `Q` – quit

One option is run per invocation; the program ends after it.

A round lasts at most 60 seconds, or until you press `q`. The board is
redrawn about five times a second. At the end the score, the highest
multiplier, the longest combo and the names of the pokemon in that combo are
shown.

Seven pokemon (or fewer, if the pokedex is smaller) are drawn at random from
the pokedex at the start. Each captured pokemon is replaced by another one
drawn at random.

## Scoring

The first capture starts a combo. A capture whose name starts with the same
letter as the previous capture, or that has the same colour, continues the
combo and raises the multiplier by one. Any other capture ends the combo and
sets the multiplier back to 1. Each capture adds its points times the current
multiplier to the score.

## Pokedex format

One pokemon per line, comma separated, with no header line:

```
Name,points,COLOR,PATTERN
```

`COLOR` is one of `ROJO`, `AZUL`, `AMARILLO`, `MAGENTA` or `VERDE`; any other
value leaves the pokemon without a colour. Loading stops at the end of the
file or at the first line that does not hold those four columns with an
integer in the second.

`PATTERN` is a string of moves applied in order every time the player moves:

| Letter | Move                                  |
|--------|---------------------------------------|
| `N`    | up                                    |
| `S`    | down                                  |
| `E`    | right                                 |
| `O`    | left                                  |
| `J`    | the player's last direction           |
| `I`    | the opposite of the player's last direction |
| `R`    | a random direction that stays on the board |

Moves that would leave the board, and unknown letters, are skipped.

## Using it as a library

The pieces of the game are plain Python objects:

- `pokegame.game.Game(rng)` – `start(reader)` loads the pool and places the
  pokemon, `step(key)` applies a key press, resolves captures and draws the
  board to stdout, `results()` returns a `GameResults` with `points`,
  `max_multiplier`, `max_combo` and `best_chain` (names, sorted),
  `show_results(out)` writes them.
- `pokegame.board.Board(width, height, rng)` – `move_player(direction)`,
  `move_pokes()`, `is_captured(poke)`, `render()` and `show(out)`.
- `pokegame.pokedex.Pokedex` – an ordered collection with `add`, `copy`,
  `add_random`, `sorted_by_name`, `print_all`, `print_names` and `load_from`.
- `pokegame.poke.Poke` – a dataclass; `Poke.spawn(...)` places it at a random
  cell; `read_poke(reader, rng)` reads one from a CSV line.
- `pokegame.menu.Menu` – `add(key, label, action)`, `run(key, ctx)`,
  `render()` and `show(out)`.
- `pokegame.csv_reader.CsvReader(path, sep)` – a context manager reading one
  line at a time with `read_line(parsers)`.
- `pokegame.enums` – `Key`, `Direction`, `Pattern` and `Color`.

`Game` and `Board` take a `random.Random` instance, so a round can be replayed
exactly from a seed:

```python
import random

from pokegame.csv_reader import CsvReader
from pokegame.enums import Key
from pokegame.game import Game

game = Game(random.Random(42))
with CsvReader("pokedex.csv") as reader:
    game.start(reader)
game.step(Key.RIGHT)
print(game.results())
```

## What it does not do

Scores are not saved anywhere; there is no high-score table. The menu is not
shown again after an option has run.

## Tests

```
pip install .[test]
pytest
```
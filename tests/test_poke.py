import random

import pytest

from pokegame.csv_reader import CsvReader
from pokegame.engine import ANSI_COLOR_BLUE, ANSI_COLOR_MAGENTA, ANSI_COLOR_YELLOW
from pokegame.enums import HEIGHT, WIDTH, Color
from pokegame.poke import Poke, read_poke


def _write(tmp_path, text):
    path = tmp_path / "pokes.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_spawn_keeps_fields_and_stays_on_board():
    rng = random.Random(7)
    for _ in range(200):
        p = Poke.spawn("Pikachu", 100, Color.YELLOW, "JJ", rng)
        assert (p.name, p.points, p.color, p.pattern) == ("Pikachu", 100, Color.YELLOW, "JJ")
        assert 0 <= p.x < WIDTH
        assert 0 <= p.y < HEIGHT


def test_spawn_is_reproducible_with_seed():
    a = Poke.spawn("Eevee", 180, Color.MAGENTA, "N", random.Random(3))
    b = Poke.spawn("Eevee", 180, Color.MAGENTA, "N", random.Random(3))
    assert (a.x, a.y) == (b.x, b.y)


def test_copy_is_independent():
    p = Poke("Charmander", 200, Color.RED, "II", 4, 5)
    c = p.copy()
    assert c == p
    c.x = 9
    c.name = "Other"
    assert p.x == 4
    assert p.name == "Charmander"


def test_colored_initial():
    assert Poke("Squirtle", 120, Color.BLUE, "O").colored_initial() == ANSI_COLOR_BLUE + "S"
    assert Poke("Zapdos", 500, Color.YELLOW, "R").colored_initial() == ANSI_COLOR_YELLOW + "Z"
    assert Poke("Jiggly", 10, Color.PINK, "N").colored_initial() == ANSI_COLOR_MAGENTA + "J"


def test_describe_format():
    p = Poke("Pikachu", 100, Color.YELLOW, "JJ")
    assert p.describe() == "Nombre: Pikachu Puntos: 100 Color: Amarillo Patron: JJ"


def test_describe_red_uses_green_label():
    p = Poke("Charmander", 200, Color.RED, "II")
    assert "Color: Verde " in p.describe()


def test_read_poke_parses_line(tmp_path):
    path = _write(tmp_path, "Pikachu,100,AMARILLO,JJ\n")
    with CsvReader(path) as reader:
        p = read_poke(reader, random.Random(1))
        assert p.name == "Pikachu"
        assert p.points == 100
        assert p.color is Color.YELLOW
        assert p.pattern == "JJ"
        assert read_poke(reader) is None


def test_read_poke_rejects_bad_points(tmp_path):
    path = _write(tmp_path, "Pikachu,lots,AMARILLO,JJ\n")
    with CsvReader(path) as reader:
        assert read_poke(reader) is None


def test_read_poke_rejects_short_line(tmp_path):
    path = _write(tmp_path, "Pikachu,100\n")
    with CsvReader(path) as reader:
        assert read_poke(reader) is None


def test_read_poke_unknown_colour(tmp_path):
    path = _write(tmp_path, "Ditto,50,GRIS,R\n")
    with CsvReader(path) as reader:
        p = read_poke(reader)
    assert p.color is None
    assert p.colored_initial() == "D"


def test_read_poke_closed_reader(tmp_path):
    path = _write(tmp_path, "Pikachu,100,AMARILLO,JJ\n")
    reader = CsvReader(path)
    reader.close()
    with pytest.raises(ValueError):
        read_poke(reader)
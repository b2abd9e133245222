import io
import string

import pytest

from pokegame.menu import Menu


def _count(ctx):
    ctx["n"] += 1
    return True


def test_run_actions_and_count():
    menu = Menu()
    menu.add("a", "Opcion A", _count)
    menu.add("b", "Opcion B", _count)
    ctx = {"n": 0}
    assert menu.run("a", ctx) is True
    assert ctx["n"] == 1
    assert menu.run("b", ctx) is True
    assert ctx["n"] == 2
    assert menu.run("c", ctx) is False
    assert ctx["n"] == 2


def test_special_characters():
    menu = Menu()
    menu.add("@", "Opcion @", _count)
    menu.add("#", "Opcion #", _count)
    ctx = {"n": 0}
    assert menu.run("@", ctx) and menu.run("#", ctx)
    assert ctx["n"] == 2


def test_duplicate_key_rejected():
    menu = Menu()
    menu.add("a", "Primera opción", _count)
    with pytest.raises(ValueError):
        menu.add("a", "Segunda opción", _count)
    with pytest.raises(ValueError):
        menu.add("A", "Tercera opción", _count)


def test_invalid_options_rejected():
    menu = Menu()
    with pytest.raises(ValueError):
        menu.add("\0", "", _count)
    with pytest.raises(ValueError):
        menu.add("\0", None, _count)
    with pytest.raises(ValueError):
        menu.add("x", "Opcion", None)
    with pytest.raises(ValueError):
        menu.add("xy", "Opcion", _count)


def test_case_insensitive():
    menu = Menu()
    menu.add("a", "Opción A", _count)
    menu.add("Q", "Salir", _count)
    ctx = {"n": 0}
    assert menu.run("a", ctx)
    assert menu.run("A", ctx)
    assert menu.run("q", ctx)
    assert menu.run("Q", ctx)
    assert ctx["n"] == 4


def test_many_options():
    menu = Menu()
    for c in string.ascii_lowercase:
        menu.add(c, "Opción", _count)
    ctx = {"n": 0}
    assert all(menu.run(c, ctx) for c in string.ascii_uppercase)
    assert ctx["n"] == len(string.ascii_lowercase)


def test_render_single_option():
    menu = Menu()
    menu.add("a", "Opcion A", _count)
    assert menu.render() == "Opciones: \n\t[A]. Opcion A\n"


def test_show_lists_every_option():
    menu = Menu()
    menu.add("a", "Opcion A", _count)
    menu.add("b", "Opcion B", _count)
    out = io.StringIO()
    menu.show(out)
    text = out.getvalue()
    assert text == menu.render()
    assert text.startswith("Opciones: \n")
    assert "\t[A]. Opcion A\n" in text
    assert "\t[B]. Opcion B\n" in text
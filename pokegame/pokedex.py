"""An ordered collection of pokemon."""

from __future__ import annotations

import random
import sys
from typing import Iterator, List, Optional, TextIO

from pokegame.bst import BinarySearchTree
from pokegame.csv_reader import CsvReader
from pokegame.linked_list import LinkedList
from pokegame.poke import Poke, RandomSource, read_poke


def _by_name(a: Poke, b: Poke) -> int:
    return (a.name > b.name) - (a.name < b.name)


class Pokedex:
    """Pokemon kept in insertion order."""

    def __init__(self) -> None:
        self._pokes: LinkedList[Poke] = LinkedList()

    def add(self, poke: Poke) -> None:
        """Append ``poke``."""
        self._pokes.append(poke)

    def clear(self) -> None:
        """Remove every pokemon."""
        self._pokes.clear()

    def copy(self) -> "Pokedex":
        """A deep copy: every pokemon is copied too."""
        other = Pokedex()
        for poke in self:
            other.add(poke.copy())
        return other

    def add_random(self, target: "Pokedex", rng: RandomSource = None) -> Poke:
        """Append a copy of a random pokemon of this pokedex to ``target``.

        Returns the copy. Raises ValueError if this pokedex is empty.
        """
        if not self._pokes:
            raise ValueError("cannot pick from an empty pokedex")
        source = rng if rng is not None else random
        chosen = self._pokes[source.randrange(len(self._pokes))].copy()
        target.add(chosen)
        return chosen

    def remove_at(self, index: int) -> Poke:
        """Remove and return the pokemon at ``index``."""
        return self._pokes.pop(index)

    def __getitem__(self, index: int) -> Poke:
        return self._pokes[index]

    def __len__(self) -> int:
        return len(self._pokes)

    def __iter__(self) -> Iterator[Poke]:
        return iter(self._pokes)

    def sorted_by_name(self) -> List[Poke]:
        """Pokemon in alphabetical order of name."""
        tree: BinarySearchTree[Poke] = BinarySearchTree(_by_name)
        for poke in self:
            tree.insert(poke)
        return list(tree)

    def print_all(self, out: Optional[TextIO] = None) -> None:
        """Write one description line per pokemon, by name."""
        stream = out if out is not None else sys.stdout
        for poke in self.sorted_by_name():
            stream.write(poke.describe() + "\n")

    def print_names(self, out: Optional[TextIO] = None) -> None:
        """Write the names, by name, each followed by a space."""
        stream = out if out is not None else sys.stdout
        for poke in self.sorted_by_name():
            stream.write(poke.name + " ")

    def load_from(self, reader: Optional[CsvReader], rng: RandomSource = None) -> bool:
        """Append every pokemon ``reader`` yields. False if there is no reader."""
        if reader is None:
            return False
        while (poke := read_poke(reader, rng)) is not None:
            self.add(poke)
        return True
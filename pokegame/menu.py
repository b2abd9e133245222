"""A keyed menu of actions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from pokegame.hash_table import HashTable

Action = Callable[[Any], object]

_CAPACITY = 8


class Menu:
    """Options chosen by a single, case-insensitive character."""

    def __init__(self) -> None:
        self._labels = HashTable(_CAPACITY)
        self._actions = HashTable(_CAPACITY)

    @staticmethod
    def _normalize(key: str) -> str:
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"menu keys are single characters, not {key!r}")
        upper = key.upper()
        return upper if len(upper) == 1 else key

    def add(self, key: str, label: str, action: Action) -> None:
        """Register ``action`` under ``key`` with a description.

        Raises ValueError for an empty label, a missing action or a key
        already in use.
        """
        if not label:
            raise ValueError("a menu option needs a label")
        if action is None or not callable(action):
            raise ValueError("a menu option needs an action")
        normalized = self._normalize(key)
        if normalized in self._actions:
            raise ValueError(f"menu key {normalized!r} already in use")
        self._labels.put(normalized, label)
        self._actions.put(normalized, action)

    def run(self, key: str, ctx: Any = None) -> bool:
        """Run the action under ``key`` with ``ctx``. False if there is none."""
        try:
            normalized = self._normalize(key)
        except ValueError:
            return False
        action = self._actions.get(normalized)
        if action is None:
            return False
        action(ctx)
        return True

    def render(self) -> str:
        """The option list as text."""
        lines = ["Opciones: \n"]
        lines.extend(f"\t[{key}]. {label}\n" for key, label in self._labels.items())
        return "".join(lines)

    def show(self, out: Optional[TextIO] = None) -> None:
        """Write the option list."""
        (out if out is not None else sys.stdout).write(self.render())
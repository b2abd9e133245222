"""Line-by-line reading of separated-value files with per-column parsers."""

from __future__ import annotations

import os
import re
from typing import Any, Callable, List, Optional, Sequence, Union

Parser = Callable[[str], Any]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def split_fields(line: str, sep: str) -> List[str]:
    """Split ``line`` on every ``sep``, keeping empty fields."""
    return line.split(sep)


def parse_int(text: str) -> int:
    """Read a leading integer, ignoring leading whitespace and trailing text."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_str(text: str) -> str:
    """Take the field as a plain string; anything that is not text is rejected."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string field, got {type(text).__name__}")
    return str(text)


def parse_char(text: str) -> str:
    """Take the first character of the field, or an empty string."""
    return text[:1]


class CsvReader:
    """Reads separated-value lines from a text file."""

    def __init__(self, path: Union[str, os.PathLike], sep: str = ",") -> None:
        self._sep = sep
        self._file = open(path, encoding="utf-8")

    def read_line(self, parsers: Sequence[Parser]) -> Optional[List[Any]]:
        """Read the next line and parse its fields with ``parsers``.

        Returns None at end of file. Otherwise returns the values parsed
        before the first field that a parser rejects with ValueError; a line
        with more fields than parsers yields an empty list. A complete line
        gives one value per parser.
        """
        if self._file is None:
            raise ValueError("read from a closed CSV reader")
        line = self._file.readline()
        if not line:
            return None
        fields = split_fields(line.rstrip("\r\n"), self._sep)
        if len(fields) > len(parsers):
            return []
        values: List[Any] = []
        for parser, field in zip(parsers, fields):
            try:
                values.append(parser(field))
            except ValueError:
                break
        return values

    def close(self) -> None:
        """Close the underlying file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "CsvReader":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
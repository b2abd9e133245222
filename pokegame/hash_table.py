"""Hash table with string keys, separate chaining and djb2 hashing."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Tuple

_MASK = (1 << 64) - 1
_REHASH_FACTOR = 0.75
_MIN_CAPACITY = 3


def djb2(key: str) -> int:
    """The 64-bit djb2 hash of the UTF-8 bytes of ``key``.

    Bytes above 127 count as negative values, as signed characters do.
    """
    value = 5381
    for byte in key.encode("utf-8"):
        char = byte if byte < 128 else (byte - 256) & _MASK
        value = (value * 33 + char) & _MASK
    return value


class HashTable:
    """Maps string keys to values; the table doubles when it gets crowded."""

    def __init__(self, capacity: int = _MIN_CAPACITY) -> None:
        self._capacity = max(capacity, _MIN_CAPACITY)
        self._buckets: List[List[list]] = [[] for _ in range(self._capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return self._capacity

    def _bucket(self, key: str) -> List[list]:
        return self._buckets[djb2(key) % self._capacity]

    def _find(self, key: str) -> Optional[list]:
        for entry in self._bucket(key):
            if entry[0] == key:
                return entry
        return None

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"keys must be strings, not {type(key).__name__}")

    def _rehash(self) -> None:
        old = self._buckets
        self._capacity *= 2
        self._buckets = [[] for _ in range(self._capacity)]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry[0]).insert(0, entry)

    def put(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key``; return the value it replaced, or None."""
        self._check_key(key)
        if self._size / self._capacity > _REHASH_FACTOR:
            self._rehash()
        entry = self._find(key)
        if entry is not None:
            previous = entry[1]
            entry[1] = value
            return previous
        self._bucket(key).insert(0, [key, value])
        self._size += 1
        return None

    def get(self, key: str, default: Any = None) -> Any:
        """The value under ``key``, or ``default``."""
        self._check_key(key)
        entry = self._find(key)
        return default if entry is None else entry[1]

    def __getitem__(self, key: str) -> Any:
        self._check_key(key)
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def pop(self, key: str) -> Any:
        """Remove ``key`` and return its value. Raises KeyError if absent."""
        self._check_key(key)
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return entry[1]
        raise KeyError(key)

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Key and value pairs, bucket by bucket."""
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value

    def visit(self, func: Callable[[str, Any], bool]) -> int:
        """Call ``func(key, value)`` per entry until it returns false.

        Returns how many times ``func`` was called.
        """
        calls = 0
        for key, value in self.items():
            calls += 1
            if not func(key, value):
                break
        return calls

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items())

    def __len__(self) -> int:
        return self._size
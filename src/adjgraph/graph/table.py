"""Int-keyed table that iterates in ascending key order.

A dict gives O(1) lookup; a parallel sorted key list (maintained with
bisect) gives deterministic ordered iteration and positional access,
which is what the graph cursors need: a cursor is just an index into
the key list, so advancing it never materializes anything.

    _values:  dict[int, V]   key -> value
    _keys:    list[int]      same keys, kept sorted

Inserting a new key costs O(log n) to find the slot plus O(n) for the
list shift.  Overwriting an existing key is O(1) and does not touch
the key list, so positions stay stable across weight updates.
"""
from __future__ import annotations

import bisect
from typing import Generic, Iterator, TypeVar

V = TypeVar("V")


class SortedTable(Generic[V]):
    """Mapping from int to V with sorted iteration and index access.

    INVARIANT: set(_keys) == set(_values) and _keys is strictly
    increasing.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self) -> None:
        self._keys: list[int] = []
        self._values: dict[int, V] = {}

    # ---- mapping ---------------------------------------------------------

    def __setitem__(self, key: int, value: V) -> None:
        if key not in self._values:
            bisect.insort(self._keys, key)
        self._values[key] = value

    def __getitem__(self, key: int) -> V:
        return self._values[key]

    def __delitem__(self, key: int) -> None:
        del self._values[key]  # KeyError propagates, like dict
        i = bisect.bisect_left(self._keys, key)
        del self._keys[i]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[int]:
        return iter(self._keys)

    def get(self, key: int, default: V | None = None) -> V | None:
        return self._values.get(key, default)

    def keys(self) -> list[int]:
        """Snapshot of the keys in ascending order."""
        return list(self._keys)

    def values(self) -> Iterator[V]:
        for key in self._keys:
            yield self._values[key]

    def items(self) -> Iterator[tuple[int, V]]:
        for key in self._keys:
            yield key, self._values[key]

    # ---- positional access (used by cursors) -----------------------------

    def key_at(self, index: int) -> int:
        return self._keys[index]

    def value_at(self, index: int) -> V:
        return self._values[self._keys[index]]

    # ---- dunder ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedTable):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"SortedTable({{{body}}})"

"""A map that keeps its keys sorted by a user-supplied comparator."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from collectkit.maps import K, MapLike, V

Comparator = Callable[[Any, Any], int]


def compare_numbers(a: Any, b: Any) -> int:
    """Compare two real numbers: -1, 0 or 1."""
    return (a > b) - (a < b)


class TreeMap(MapLike[K, V]):
    """Ordered map; keys and values come back in comparator order."""

    def __init__(self, comparator: Comparator) -> None:
        if comparator is None:
            raise ValueError("comparator must not be None")
        self._compare = comparator
        self._keys: list[K] = []
        self._values: list[V] = []

    @classmethod
    def from_mapping(
        cls, comparator: Comparator, mapping: Mapping[K, V] | None
    ) -> "TreeMap[K, V]":
        """Build a tree map holding every item of ``mapping``."""
        tree = cls(comparator)
        for key, value in (mapping or {}).items():
            tree.put(key, value)
        return tree

    def _locate(self, key: Any) -> tuple[int, bool]:
        """Binary search: the position of ``key`` and whether it is present."""
        lo, hi = 0, len(self._keys)
        while lo < hi:
            mid = (lo + hi) // 2
            order = self._compare(self._keys[mid], key)
            if order == 0:
                return mid, True
            if order < 0:
                lo = mid + 1
            else:
                hi = mid
        return lo, False

    def _found_at(self, key: Any) -> int | None:
        position, found = self._locate(key)
        return position if found else None

    def put(self, key, value):
        position, found = self._locate(key)
        if found:
            self._values[position] = value
            return
        self._keys.insert(position, key)
        self._values.insert(position, value)

    def get(self, key, default=None):
        position = self._found_at(key)
        return default if position is None else self._values[position]

    def delete(self, key, default=None):
        position = self._found_at(key)
        if position is None:
            return default
        del self._keys[position]
        return self._values.pop(position)

    def keys(self):
        return list(self._keys)

    def values(self):
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        return self._found_at(key) is not None
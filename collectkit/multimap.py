"""A map from each key to a list of values."""

from __future__ import annotations

from typing import Any, Generic

from collectkit.hashmap import HashMap
from collectkit.maps import _MISSING, BuiltinMap, K, MapLike, V
from collectkit.treemap import Comparator, TreeMap


class MultiMap(MapLike[K, list], Generic[K, V]):
    """Maps a key to several values, stored as a list in a backing map.

    Lists handed out by ``get`` and ``values`` are copies.
    """

    def __init__(self, backing: MapLike[K, list]) -> None:
        self._backing = backing

    @classmethod
    def with_tree_map(cls, comparator: Comparator) -> "MultiMap[K, V]":
        """Create a multimap over a TreeMap; ``comparator`` must not be None."""
        return cls(TreeMap(comparator))

    @classmethod
    def with_hash_map(cls, size: int = 0) -> "MultiMap[K, V]":
        """Create a multimap over a HashMap."""
        return cls(HashMap(size))

    @classmethod
    def with_builtin_map(cls, size: int = 0) -> "MultiMap[K, V]":
        """Create a multimap over a plain dict; ``size`` is only a hint."""
        return cls(BuiltinMap())

    def put(self, key: K, value: V) -> None:
        """Append ``value`` to the values under ``key``."""
        self.put_many(key, value)

    def put_many(self, key: K, *args: V) -> None:
        """Append every argument to the values under ``key``."""
        self._backing.put(key, [*self._backing.get(key, []), *args])

    def get(self, key, default: Any = None):
        stored = self._backing.get(key, _MISSING)
        return default if stored is _MISSING else list(stored)

    def delete(self, key, default: Any = None):
        return self._backing.delete(key, default)

    def keys(self):
        return self._backing.keys()

    def values(self):
        return [list(stored) for stored in self._backing.values()]

    def __contains__(self, key: object) -> bool:
        return key in self._backing
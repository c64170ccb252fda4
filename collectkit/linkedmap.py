"""A map that remembers the order in which keys were first inserted."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

from collectkit.hashmap import HashMap
from collectkit.maps import MapLike
from collectkit.treemap import TreeMap

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


class _Link:
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Any = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.prev: _Link = self
        self.next: _Link = self


class LinkedMap(MapLike[K, V], Generic[K, V]):
    """Map over a backing map that yields keys in insertion order.

    Replacing the value of an existing key keeps its position.
    """

    def __init__(self, backing: MapLike[K, Any]) -> None:
        self._backing = backing
        self._root = _Link()
        self._length = 0

    @classmethod
    def with_hash_map(cls, size: int = 0) -> "LinkedMap[K, V]":
        """Create a linked map over a HashMap."""
        return cls(HashMap(size))

    @classmethod
    def with_tree_map(cls, comparator: Callable[[Any, Any], int]) -> "LinkedMap[K, V]":
        """Create a linked map over a TreeMap; ``comparator`` must not be None."""
        return cls(TreeMap(comparator))

    def _links(self) -> Iterator[_Link]:
        cur = self._root.next
        while cur is not self._root:
            yield cur
            cur = cur.next

    def put(self, key: K, value: V) -> None:
        link = self._backing.get(key, _MISSING)
        if link is not _MISSING:
            link.value = value
            return
        link = _Link(key, value)
        self._backing.put(key, link)
        last = self._root.prev
        link.prev, link.next = last, self._root
        last.next = link
        self._root.prev = link
        self._length += 1

    def get(self, key: K, default: Any = None) -> Any:
        link = self._backing.get(key, _MISSING)
        return default if link is _MISSING else link.value

    def delete(self, key: K, default: Any = None) -> Any:
        link = self._backing.delete(key, _MISSING)
        if link is _MISSING:
            return default
        link.prev.next = link.next
        link.next.prev = link.prev
        self._length -= 1
        return link.value

    def keys(self) -> list[K]:
        return [link.key for link in self._links()]

    def values(self) -> list[V]:
        return [link.value for link in self._links()]

    def __contains__(self, key: object) -> bool:
        return self._backing.get(key, _MISSING) is not _MISSING  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._length
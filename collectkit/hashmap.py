"""A hash map for keys that supply their own hash code and equality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from collectkit.maps import MapLike

V = TypeVar("V")

_MISSING: Any = object()


class HashKey(ABC):
    """A key that provides its own hash code and equality test."""

    @abstractmethod
    def code(self) -> int:
        """Return the hash code; it should spread keys evenly."""

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Return True when ``other`` is the same key."""


@dataclass
class _Entry:
    key: Any
    value: Any


class HashMap(MapLike[Any, V], Generic[V]):
    """Map that buckets entries by ``key.code()`` and chains collisions.

    Keys only need ``code()`` and ``equals()``; they need not be hashable.
    """

    def __init__(self, size: int = 0) -> None:
        self._size_hint = size
        self._buckets: dict[int, list[_Entry]] = {}

    def _find(self, key: Any) -> _Entry | None:
        for entry in self._buckets.get(key.code(), ()):
            if entry.key.equals(key):
                return entry
        return None

    def put(self, key: Any, value: V) -> None:
        code = key.code()
        bucket = self._buckets.get(code)
        if bucket is None:
            self._buckets[code] = [_Entry(key, value)]
            return
        for entry in bucket:
            if entry.key.equals(key):
                entry.value = value
                return
        bucket.append(_Entry(key, value))

    def get(self, key: Any, default: Any = None) -> Any:
        entry = self._find(key)
        return default if entry is None else entry.value

    def delete(self, key: Any, default: Any = None) -> Any:
        code = key.code()
        bucket = self._buckets.get(code)
        if bucket is None:
            return default
        for position, entry in enumerate(bucket):
            if entry.key.equals(key):
                del bucket[position]
                if not bucket:
                    del self._buckets[code]
                return entry.value
        return default

    def keys(self) -> list[Any]:
        return [entry.key for bucket in self._buckets.values() for entry in bucket]

    def values(self) -> list[V]:
        return [entry.value for bucket in self._buckets.values() for entry in bucket]

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def buckets(self) -> dict[int, list[tuple[Any, V]]]:
        """Return a snapshot of the buckets: code -> chain of (key, value)."""
        return {
            code: [(entry.key, entry.value) for entry in bucket]
            for code, bucket in self._buckets.items()
        }
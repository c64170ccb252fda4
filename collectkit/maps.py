"""The common map interface, a dict-backed map and helpers for plain mappings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


def keys_values(mapping: Mapping[K, V] | None) -> tuple[list[K], list[V]]:
    """Return the keys and the values of ``mapping`` in matching order."""
    if not mapping:
        return [], []
    ks, vs = zip(*mapping.items())
    return list(ks), list(vs)


def keys(mapping: Mapping[K, V] | None) -> list[K]:
    """Return the keys of ``mapping`` as a new list; ``None`` gives ``[]``."""
    return keys_values(mapping)[0]


def values(mapping: Mapping[K, V] | None) -> list[V]:
    """Return the values of ``mapping`` as a new list; ``None`` gives ``[]``."""
    return keys_values(mapping)[1]


class MapLike(ABC, Generic[K, V]):
    """Interface shared by the map containers.

    ``put`` stores a value, replacing any previous one; ``get`` and ``delete``
    return ``default`` when the key is absent; the order of ``keys`` and
    ``values`` depends on the implementation.
    """

    @abstractmethod
    def put(self, key: K, value: V) -> None: ...

    @abstractmethod
    def get(self, key: K, default: Any = None) -> Any: ...

    @abstractmethod
    def delete(self, key: K, default: Any = None) -> Any: ...

    @abstractmethod
    def keys(self) -> list[K]: ...

    @abstractmethod
    def values(self) -> list[V]: ...

    def __contains__(self, key: object) -> bool:
        return self.get(key, _MISSING) is not _MISSING  # type: ignore[arg-type]


class BuiltinMap(MapLike[K, V]):
    """Exposes a plain dict, used directly and not copied, as a map."""

    def __init__(self, data: dict[K, V] | None = None) -> None:
        self._data: dict[K, V] = {} if data is None else data

    def put(self, key, value):
        self._data[key] = value

    def get(self, key, default=None):
        return self._data.get(key, default)

    def delete(self, key, default=None):
        return self._data.pop(key, default)

    def keys(self):
        return keys(self._data)

    def values(self):
        return values(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
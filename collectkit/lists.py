"""Indexed list containers: an array-backed list, a doubly linked list and a
thread-safe wrapper around either of them."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_SMALL_CAPACITY = 64
_LARGE_CAPACITY = 2048


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside the valid range of a list."""

    def __init__(self, length: int, index: int) -> None:
        self.length = length
        self.index = index
        super().__init__(f"index out of range, length {length}, index {index}")


class BaseList(ABC, Generic[T]):
    """Common interface of the list containers."""

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the element at ``index``."""

    @abstractmethod
    def append(self, *args: T) -> None:
        """Append every argument at the end, in order."""

    @abstractmethod
    def add(self, index: int, item: T) -> None:
        """Insert ``item`` at ``index``; ``index == len(self)`` appends."""

    @abstractmethod
    def set(self, index: int, item: T) -> None:
        """Replace the element at ``index``."""

    @abstractmethod
    def delete(self, index: int) -> T:
        """Remove the element at ``index`` and return it."""

    def cap(self) -> int:
        """Return the capacity of the list."""
        return len(self)

    def for_each(self, fn: Callable[[int, T], Any]) -> None:
        """Call ``fn(index, item)`` for every element; an exception stops the walk."""
        for index, item in enumerate(self):
            fn(index, item)

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return the elements as a new Python list."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())


def _shrunk_capacity(capacity: int, length: int) -> int:
    if capacity <= _SMALL_CAPACITY:
        return capacity
    ratio = capacity // length if length else capacity + 1
    if capacity > _LARGE_CAPACITY and ratio >= 2:
        return capacity * 5 // 8
    if capacity <= _LARGE_CAPACITY and ratio >= 4:
        return capacity // 2
    return capacity


class ArrayList(BaseList[T]):
    """List backed by a contiguous array with explicit capacity management.

    Deleting may shrink the capacity: above 2048 slots, when fewer than half
    are used, it becomes 5/8 of itself; between 65 and 2048 slots, when at
    most a quarter are used, it is halved; at 64 slots or fewer it is kept.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._items: list[T] = []
        self._capacity = capacity

    @classmethod
    def of(cls, items: Iterable[T] | None) -> "ArrayList[T]":
        """Build a list holding ``items``; its capacity equals their count."""
        values = list(items) if items is not None else []
        result = cls(len(values))
        result._items = values
        return result

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(len(self._items), index)

    def _reserve(self, needed: int) -> None:
        if needed > self._capacity:
            self._capacity = max(needed, self._capacity * 2)

    def get(self, index: int) -> T:
        self._check(index)
        return self._items[index]

    def append(self, *args: T) -> None:
        self._reserve(len(self._items) + len(args))
        self._items.extend(args)

    def add(self, index: int, item: T) -> None:
        if not 0 <= index <= len(self._items):
            raise IndexOutOfRangeError(len(self._items), index)
        self._reserve(len(self._items) + 1)
        self._items.insert(index, item)

    def set(self, index: int, item: T) -> None:
        self._check(index)
        self._items[index] = item

    def delete(self, index: int) -> T:
        self._check(index)
        item = self._items.pop(index)
        self._capacity = _shrunk_capacity(self._capacity, len(self._items))
        return item

    def cap(self) -> int:
        return self._capacity

    def for_each(self, fn: Callable[[int, T], Any]) -> None:
        for index, item in enumerate(self._items):
            fn(index, item)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))


class _Node(Generic[T]):
    __slots__ = ("prev", "next", "value")

    def __init__(self, value: Any = None) -> None:
        self.prev: _Node[T] = self
        self.next: _Node[T] = self
        self.value = value


class LinkedList(BaseList[T]):
    """Doubly linked circular list with head and tail sentinels."""

    def __init__(self) -> None:
        self._head: _Node[T] = _Node()
        self._tail: _Node[T] = _Node()
        self._head.next = self._head.prev = self._tail
        self._tail.next = self._tail.prev = self._head
        self._length = 0

    @classmethod
    def of(cls, items: Iterable[T] | None) -> "LinkedList[T]":
        """Build a linked list holding ``items`` in order."""
        result = cls()
        if items is not None:
            result.append(*items)
        return result

    def _check(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexOutOfRangeError(self._length, index)

    def _find(self, index: int) -> _Node[T]:
        if index <= self._length // 2:
            cur = self._head.next
            for _ in range(index):
                cur = cur.next
        else:
            cur = self._tail.prev
            for _ in range(self._length - 1 - index):
                cur = cur.prev
        return cur

    def _link_before(self, successor: _Node[T], item: T) -> None:
        node: _Node[T] = _Node(item)
        node.prev, node.next = successor.prev, successor
        node.prev.next = node
        successor.prev = node
        self._length += 1

    def get(self, index: int) -> T:
        self._check(index)
        return self._find(index).value

    def append(self, *args: T) -> None:
        for item in args:
            self._link_before(self._tail, item)

    def add(self, index: int, item: T) -> None:
        if not 0 <= index <= self._length:
            raise IndexOutOfRangeError(self._length, index)
        successor = self._tail if index == self._length else self._find(index)
        self._link_before(successor, item)

    def set(self, index: int, item: T) -> None:
        self._check(index)
        self._find(index).value = item

    def delete(self, index: int) -> T:
        self._check(index)
        node = self._find(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        self._length -= 1
        return node.value

    def cap(self) -> int:
        return self._length

    def _nodes(self) -> Iterator[_Node[T]]:
        cur = self._head.next
        while cur is not self._tail:
            yield cur
            cur = cur.next

    def for_each(self, fn: Callable[[int, T], Any]) -> None:
        for index, node in enumerate(self._nodes()):
            fn(index, node.value)

    def to_list(self) -> list[T]:
        return [node.value for node in self._nodes()]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value


class ConcurrentList(BaseList[T]):
    """Wraps another list so that every operation runs under a lock."""

    def __init__(self, inner: BaseList[T]) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    def get(self, index: int) -> T:
        with self._lock:
            return self._inner.get(index)

    def append(self, *args: T) -> None:
        with self._lock:
            self._inner.append(*args)

    def add(self, index: int, item: T) -> None:
        with self._lock:
            self._inner.add(index, item)

    def set(self, index: int, item: T) -> None:
        with self._lock:
            self._inner.set(index, item)

    def delete(self, index: int) -> T:
        with self._lock:
            return self._inner.delete(index)

    def cap(self) -> int:
        with self._lock:
            return self._inner.cap()

    def for_each(self, fn: Callable[[int, T], Any]) -> None:
        with self._lock:
            self._inner.for_each(fn)

    def to_list(self) -> list[T]:
        with self._lock:
            return self._inner.to_list()

    def __len__(self) -> int:
        with self._lock:
            return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())
from dataclasses import dataclass

import pytest

from collectkit.hashmap import HashKey
from collectkit.multimap import MultiMap
from collectkit.treemap import compare_numbers


@dataclass(frozen=True)
class Key(HashKey):
    id: int

    def code(self):
        return self.id % 10

    def equals(self, other):
        return isinstance(other, Key) and other.id == self.id


def _plain(i):
    return i


def _unkey(key):
    return key.id if isinstance(key, Key) else key


KINDS = {
    "tree": (lambda: MultiMap.with_tree_map(compare_numbers), _plain),
    "hash": (lambda: MultiMap.with_hash_map(10), Key),
    "builtin": (lambda: MultiMap.with_builtin_map(10), _plain),
}


@pytest.fixture(params=sorted(KINDS))
def kind(request):
    """A fresh multimap of one backing kind and the key maker it uses."""
    factory, make_key = KINDS[request.param]
    return factory(), make_key


def _filled(kind, stored):
    m, mk = kind
    for i in stored:
        m.put(mk(i), i)
    return m, mk


@pytest.mark.parametrize("size", [-1, 0, 1])
@pytest.mark.parametrize("build", [MultiMap.with_hash_map, MultiMap.with_builtin_map])
def test_sized_constructors(build, size):
    m = build(size)
    m.put(Key(1), 1)
    assert m.get(Key(1)) == [1]
    assert m.keys() == [Key(1)]


def test_with_tree_map_requires_comparator():
    with pytest.raises(ValueError):
        MultiMap.with_tree_map(None)


@pytest.mark.parametrize("stored", [[], [1], [1, 2, 3, 4]])
def test_keys(kind, stored):
    m, _ = _filled(kind, stored)
    assert sorted(_unkey(k) for k in m.keys()) == stored


@pytest.mark.parametrize(
    "stored, want", [([], []), ([1], [[1]]), ([1, 2, 3], [[1], [2], [3]])]
)
def test_values(kind, stored, want):
    m, _ = _filled(kind, stored)
    assert sorted(m.values()) == want


@pytest.mark.parametrize(
    "keys, vals, want",
    [
        ([1], [1], {1: [1]}),
        ([1, 2, 3, 4], [1, 2, 3, 4], {1: [1], 2: [2], 3: [3], 4: [4]}),
        ([1, 2, 1, 4], [1, 2, 3, 4], {1: [1, 3], 2: [2], 4: [4]}),
    ],
)
def test_put(kind, keys, vals, want):
    m, mk = kind
    for key, value in zip(keys, vals):
        m.put(mk(key), value)
    assert all(mk(key) in m for key in want)
    assert {key: m.get(mk(key)) for key in want} == want


@pytest.mark.parametrize(
    "stored, key, want, found",
    [([], 1, None, False), ([1, 2], 3, None, False), ([1], 1, [1], True)],
)
def test_get(kind, stored, key, want, found):
    m, mk = _filled(kind, stored)
    assert m.get(mk(key)) == want
    assert (mk(key) in m) == found


def test_get_returns_copy(kind):
    m, mk = _filled(kind, [1])
    m.get(mk(1)).append(99)
    assert m.get(mk(1)) == [1]
    m.values()[0].append(42)
    assert m.values() == [[1]]


@pytest.mark.parametrize(
    "stored, key, want",
    [([], 1, None), ([1], 2, None), ([1, 2], 1, [1])],
)
def test_delete(kind, stored, key, want):
    m, mk = _filled(kind, stored)
    assert m.delete(mk(key)) == want
    assert mk(key) not in m


def test_delete_default(kind):
    m, mk = kind
    assert m.delete(mk(5), "absent") == "absent"


@pytest.mark.parametrize(
    "keys, values, want",
    [
        ([1], [[1]], {1: [1]}),
        ([1, 2, 3], [[1], [2], [3]], {1: [1], 2: [2], 3: [3]}),
        ([1], [[1, 2, 3]], {1: [1, 2, 3]}),
        ([1, 2, 3], [[1, 2, 3]] * 3, {1: [1, 2, 3], 2: [1, 2, 3], 3: [1, 2, 3]}),
        ([1, 1], [[1, 2, 3, 4, 5], [6]], {1: [1, 2, 3, 4, 5, 6]}),
        ([1, 1], [[1], [2, 3, 4, 5, 6]], {1: [1, 2, 3, 4, 5, 6]}),
    ],
)
def test_put_many(kind, keys, values, want):
    m, mk = kind
    for key, vals in zip(keys, values):
        m.put_many(mk(key), *vals)
    assert {key: m.get(mk(key)) for key in want} == want


def test_put_many_without_values_stores_empty_list(kind):
    m, mk = kind
    m.put_many(mk(7))
    assert mk(7) in m
    assert m.get(mk(7)) == []


def test_tree_keys_are_sorted():
    m = MultiMap.with_tree_map(compare_numbers)
    for key in (3, 1, 2):
        m.put(key, key)
    assert m.keys() == [1, 2, 3]
    assert m.values() == [[1], [2], [3]]
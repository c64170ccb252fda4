# collectkit

Small, dependency-free container types with explicit, predictable behaviour.
It is a library only: there is no command-line tool, and nothing is stored
outside the Python objects themselves.

## Lists (`collectkit.lists`)

All lists share one interface, `BaseList`: `get`, `append`, `add`, `set`,
`delete`, `cap`, `for_each`, `to_list`, plus `len()` and iteration. An index
outside the list raises `IndexOutOfRangeError` (a subclass of `IndexError`
that carries `length` and `index`).

```python
from collectkit.lists import ArrayList, LinkedList, ConcurrentList, IndexOutOfRangeError

items = ArrayList.of([1, 2, 3])
items.add(0, 100)          # [100, 1, 2, 3]
items.delete(1)            # returns 1
items.to_list()            # [100, 2, 3]

try:
    items.get(10)
except IndexOutOfRangeError as exc:
    print(exc.length, exc.index)

chain = LinkedList.of([1, 2, 3])
chain.append(4, 5)         # append takes any number of items

safe = ConcurrentList(ArrayList.of([1, 2, 3]))   # every call runs under a lock
```

- `add(index, item)` accepts `index == len(list)`, which appends.
- `to_list()` always returns a new Python list; iterating works on a snapshot.
- `for_each(fn)` calls `fn(index, item)` for every element and stops at the
  first exception, which it lets through.
- `ArrayList(capacity)` starts empty with the given capacity (a negative value
  raises `ValueError`); `ArrayList.of(items)` starts with a capacity equal to
  the number of items, and `None` gives an empty list. The capacity grows when
  needed and may shrink after `delete`: above 2048 slots, when fewer than half
  are used, it becomes 5/8 of itself; between 65 and 2048 slots, when at most a
  quarter are used, it is halved; at 64 slots or fewer it is kept.
- `LinkedList` is a doubly linked list; its `cap()` equals its length.

## Maps

Every map offers `put(key, value)`, `get(key, default=None)`,
`delete(key, default=None)` (returns the removed value, or `default`),
`keys()`, `values()` and `in`. They all implement `MapLike` from
`collectkit.maps`.

```python
from collectkit.maps import BuiltinMap, keys, values, keys_values
from collectkit.treemap import TreeMap, compare_numbers
from collectkit.linkedmap import LinkedMap
from collectkit.multimap import MultiMap

tree = TreeMap(compare_numbers)
tree.put(1, 11)
tree.get(1)                 # 11
tree.keys()                 # keys in comparator order

ordered = LinkedMap.with_tree_map(compare_numbers)
ordered.put(2, "b")
ordered.put(1, "a")
ordered.keys()              # [2, 1] - insertion order
len(ordered)                # 2

multi = MultiMap.with_tree_map(compare_numbers)
multi.put(1, 1)
multi.put_many(1, 2, 3)
multi.get(1)                # [1, 2, 3]
```

- `BuiltinMap(data)` wraps a plain dict, used directly rather than copied.
- `keys`, `values` and `keys_values` take a plain mapping (or `None`, which
  gives empty lists) and return new lists; `keys_values` returns both in
  matching order.
- `TreeMap(comparator)` keeps keys sorted by `comparator(a, b)`, which returns
  a negative number, zero or a positive number. `compare_numbers` does this for
  real numbers. Passing `None` raises `ValueError`.
  `TreeMap.from_mapping(comparator, mapping)` builds one from a mapping.
- `LinkedMap` keeps keys in the order they were first put; replacing the value
  of an existing key keeps its place. Build it with `LinkedMap.with_hash_map(size)`,
  `LinkedMap.with_tree_map(comparator)` or `LinkedMap(backing)` over any `MapLike`.
- `MultiMap` maps each key to a list of values. Build it with
  `with_tree_map(comparator)`, `with_hash_map(size)`, `with_builtin_map(size)`
  (the size is only a hint) or `MultiMap(backing)`. `get` and `values` hand out
  copies of the stored lists; `delete` returns the removed list.

### HashMap (`collectkit.hashmap`)

`HashMap` takes keys that implement `HashKey` (`code()` and `equals()`), so
you decide how keys are bucketed and compared; keys need not be hashable.
Keys with the same code share a bucket and are told apart by `equals`.

```python
from collectkit.hashmap import HashKey, HashMap

class Point(HashKey):
    def __init__(self, x):
        self.x = x
    def code(self):
        return self.x % 10
    def equals(self, other):
        return isinstance(other, Point) and other.x == self.x

m = HashMap(10)
m.put(Point(1), "one")
m.put(Point(11), "eleven")  # same bucket as Point(1)
m.get(Point(1))             # "one"
m.buckets()                 # {1: [(Point(1), "one"), (Point(11), "eleven")]}
```

`buckets()` returns a snapshot mapping each code to its chain of
`(key, value)` pairs.

## Tests

```
pip install -e .[test]
pytest
```
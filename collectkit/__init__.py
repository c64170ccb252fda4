"""Generic containers: array and linked lists, a lock-guarded list wrapper,
and dict-backed, hash, tree, linked and multi maps."""

__version__ = "0.1.0"
__all__ = ["lists", "maps", "hashmap", "treemap", "linkedmap", "multimap"]
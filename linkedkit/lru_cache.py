"""Least-recently-used cache of fixed capacity."""

from collections import OrderedDict
from typing import Hashable


class LRUCache:
    """Cache that evicts the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: OrderedDict[Hashable, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get(self, key: Hashable) -> int:
        """Return the value for key and mark it recently used, or -1 if absent."""
        if key not in self._items:
            return -1
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store value under key, evicting the least recently used key if full."""
        if key in self._items:
            self._items.move_to_end(key)
        elif len(self._items) == self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value
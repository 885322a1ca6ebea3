"""Least-frequently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable


class LFUCache:
    """Cache that evicts the least frequently used key when full.

    Ties in use count go to the least recently used key. A cache whose
    capacity is zero or less stores nothing.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._values: dict[Hashable, int] = {}
        self._freq: dict[Hashable, int] = {}
        # Within each frequency, keys are ordered from least to most recent.
        self._by_freq: dict[int, OrderedDict[Hashable, None]] = {}
        self._min_freq = 0

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def _touch(self, key: Hashable) -> None:
        freq = self._freq[key]
        keys = self._by_freq[freq]
        del keys[key]
        if not keys:
            del self._by_freq[freq]
            if self._min_freq == freq:
                self._min_freq += 1
        self._freq[key] = freq + 1
        self._by_freq.setdefault(freq + 1, OrderedDict())[key] = None

    def get(self, key: Hashable) -> int:
        """Return the value for key and count a use, or -1 if absent."""
        if key not in self._values:
            return -1
        self._touch(key)
        return self._values[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store value under key, evicting the least frequently used key if full."""
        if self.capacity <= 0:
            return
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) >= self.capacity:
            keys = self._by_freq[self._min_freq]
            evicted, _ = keys.popitem(last=False)
            if not keys:
                del self._by_freq[self._min_freq]
            del self._values[evicted]
            del self._freq[evicted]
        self._values[key] = value
        self._freq[key] = 1
        self._by_freq.setdefault(1, OrderedDict())[key] = None
        self._min_freq = 1
"""Key counter with constant-time increment, decrement, minimum and maximum."""

from __future__ import annotations


class _Bucket:
    __slots__ = ("count", "keys", "prev", "next")

    def __init__(self, count: int) -> None:
        self.count = count
        self.keys: dict[str, None] = {}
        self.prev: _Bucket | None = None
        self.next: _Bucket | None = None


class AllOne:
    """Counts string keys; every operation runs in constant time.

    Buckets of keys sharing a count form a list sorted by ascending count.
    """

    def __init__(self) -> None:
        self._head = _Bucket(0)
        self._tail = _Bucket(0)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._where: dict[str, _Bucket] = {}

    def __len__(self) -> int:
        return len(self._where)

    def __contains__(self, key: object) -> bool:
        return key in self._where

    @staticmethod
    def _insert_after(anchor: _Bucket, count: int) -> _Bucket:
        bucket = _Bucket(count)
        bucket.prev = anchor
        bucket.next = anchor.next
        anchor.next.prev = bucket
        anchor.next = bucket
        return bucket

    @staticmethod
    def _unlink(bucket: _Bucket) -> None:
        bucket.prev.next = bucket.next
        bucket.next.prev = bucket.prev

    def _leave(self, key: str, bucket: _Bucket) -> None:
        del bucket.keys[key]
        if not bucket.keys:
            self._unlink(bucket)

    def inc(self, key: str) -> None:
        """Add one to the count of key; a new key starts at 1."""
        current = self._where.get(key)
        anchor = current if current is not None else self._head
        new_count = anchor.count + 1
        target = anchor.next
        if target is self._tail or target.count != new_count:
            target = self._insert_after(anchor, new_count)
        target.keys[key] = None
        self._where[key] = target
        if current is not None:
            self._leave(key, current)

    def dec(self, key: str) -> None:
        """Subtract one from the count of key, dropping it at zero."""
        try:
            current = self._where[key]
        except KeyError:
            raise KeyError(key) from None
        new_count = current.count - 1
        if new_count == 0:
            del self._where[key]
        else:
            target = current.prev
            if target is self._head or target.count != new_count:
                target = self._insert_after(current.prev, new_count)
            target.keys[key] = None
            self._where[key] = target
        self._leave(key, current)

    def get_max_key(self) -> str:
        """Return a key with the highest count, or "" when empty."""
        bucket = self._tail.prev
        return "" if bucket is self._head else next(iter(bucket.keys))

    def get_min_key(self) -> str:
        """Return a key with the lowest count, or "" when empty."""
        bucket = self._head.next
        return "" if bucket is self._tail else next(iter(bucket.keys))
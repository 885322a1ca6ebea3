"""A doubly linked list container with editing and inspection operations."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoublyLinkedList:
    """Sequence of values held in doubly linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _find(self, value: Any) -> Optional[_Node]:
        return next((node for node in self._nodes() if node.value == value), None)

    def _unlink(self, node: _Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " <-> ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return self._head is None

    def insert_at_start(self, value: Any) -> None:
        """Put value at the front of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Put value at the back of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_before(self, value: Any, target: Any) -> None:
        """Insert value before the first occurrence of target.

        Raises ValueError if target is not in the list.
        """
        found = self._find(target)
        if found is None:
            raise ValueError(f"value {target!r} not found")
        node = _Node(value)
        node.prev = found.prev
        node.next = found
        if found.prev is not None:
            found.prev.next = node
        else:
            self._head = node
        found.prev = node
        self._size += 1

    def delete_at_start(self) -> None:
        """Remove the first value; an empty list is left as it is."""
        if self._head is not None:
            self._unlink(self._head)

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of every value."""
        outer = self._head
        while outer is not None:
            inner = outer.next
            while inner is not None:
                following = inner.next
                if inner.value == outer.value:
                    self._unlink(inner)
                inner = following
            outer = outer.next

    def swap_adjacent(self, value: Any) -> bool:
        """Swap the first node holding value with the node after it.

        Returns False when value is absent or is held by the last node.
        """
        a = self._find(value)
        if a is None or a.next is None:
            return False
        b = a.next
        before, after = a.prev, b.next
        if before is not None:
            before.next = b
        else:
            self._head = b
        if after is not None:
            after.prev = a
        else:
            self._tail = a
        b.prev, b.next = before, a
        a.prev, a.next = b, after
        return True

    def delete_all(self, value: Any) -> None:
        """Remove every occurrence of value."""
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)

    def middle(self) -> Any:
        """Return the middle value; of two middles, the second.

        Raises IndexError on an empty list.
        """
        if self._head is None:
            raise IndexError("middle of an empty list")
        return next(islice(self, self._size // 2, None))

    def is_palindrome(self) -> bool:
        """Return True when the values read the same in both directions."""
        half = self._size // 2
        return all(a == b for a, b in islice(zip(self, reversed(self)), half))
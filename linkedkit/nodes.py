"""Singly and doubly linked list nodes, with helpers to build and read them."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class ListNode:
    """Node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: Any = 0, next: Optional[ListNode] = None) -> None:
        self.val = val
        self.next = next

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


class DListNode:
    """Node of a doubly linked list."""

    __slots__ = ("val", "prev", "next")

    def __init__(
        self,
        val: Any = 0,
        prev: Optional[DListNode] = None,
        next: Optional[DListNode] = None,
    ) -> None:
        self.val = val
        self.prev = prev
        self.next = next

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node forward to the end of the list."""
        node: Optional[DListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"DListNode({self.val!r})"


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a singly linked list from values and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a singly linked list as a Python list."""
    return [] if head is None else list(head)


def build_dlist(values: Iterable[Any]) -> Optional[DListNode]:
    """Build a doubly linked list from values and return its head."""
    head: Optional[DListNode] = None
    tail: Optional[DListNode] = None
    for value in values:
        node = DListNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def dlist_values(head: Optional[DListNode]) -> list[Any]:
    """Return the values of a doubly linked list, head to tail."""
    return [] if head is None else list(head)


def dlist_values_backward(head: Optional[DListNode]) -> list[Any]:
    """Return the values of a doubly linked list, tail to head, via prev links."""
    if head is None:
        return []
    tail = head
    while tail.next is not None:
        tail = tail.next
    values = []
    node: Optional[DListNode] = tail
    while node is not None:
        values.append(node.val)
        node = node.prev
    return values
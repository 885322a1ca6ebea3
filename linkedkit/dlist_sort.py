"""Merge sort for doubly linked lists, keeping prev links consistent."""

from __future__ import annotations

from typing import Optional

from linkedkit.nodes import DListNode


def merge_two_sorted_dlists(
    a: Optional[DListNode], b: Optional[DListNode]
) -> Optional[DListNode]:
    """Merge two sorted doubly linked lists into one and return its head.

    On equal values nodes from ``a`` come first, so the merge is stable.
    """
    if a is None:
        return b
    if b is None:
        return a

    dummy = DListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val <= b.val:
            chosen, a = a, a.next
        else:
            chosen, b = b, b.next
        tail.next = chosen
        chosen.prev = tail
        tail = chosen

    rest = a if a is not None else b
    if rest is not None:
        tail.next = rest
        rest.prev = tail

    head = dummy.next
    head.prev = None
    return head


def merge_sort_dlist(head: Optional[DListNode]) -> Optional[DListNode]:
    """Sort a doubly linked list with merge sort and return its new head."""
    if head is None or head.next is None:
        return head

    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next

    second = slow.next
    slow.next = None
    second.prev = None

    return merge_two_sorted_dlists(merge_sort_dlist(head), merge_sort_dlist(second))
"""Cutting, rotating and reversing singly linked lists by segments."""

from __future__ import annotations

from typing import Optional

from linkedkit.nodes import ListNode


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list k places to the right and return its new head."""
    if k < 0:
        raise ValueError("rotation must not be negative")
    if head is None or head.next is None or k == 0:
        return head

    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1

    k %= length
    if k == 0:
        return head

    tail.next = head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Cut the list into k consecutive parts and return their heads.

    Part sizes differ by at most one, larger parts first; parts beyond
    the length of the list are empty (None).
    """
    if k <= 0:
        raise ValueError("number of parts must be positive")

    length = 0
    node = head
    while node is not None:
        length += 1
        node = node.next

    base, extra = divmod(length, k)
    parts: list[Optional[ListNode]] = []
    curr = head
    for index in range(k):
        parts.append(curr)
        size = base + (1 if index < extra else 0)
        for _ in range(size - 1):
            curr = curr.next
        if curr is not None and size > 0:
            rest = curr.next
            curr.next = None
            curr = rest
    return parts


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the nodes k at a time; a shorter remainder keeps its order."""
    if k <= 0:
        raise ValueError("group size must be positive")

    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        checker = group_prev
        for _ in range(k):
            checker = checker.next
            if checker is None:
                return dummy.next

        first = group_prev.next
        curr = first.next
        for _ in range(k - 1):
            first.next = curr.next
            curr.next = group_prev.next
            group_prev.next = curr
            curr = first.next
        group_prev = first
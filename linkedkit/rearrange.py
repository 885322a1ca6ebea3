"""Rearranging the nodes of singly linked lists in place."""

from __future__ import annotations

from typing import Any, Optional

from linkedkit.nodes import ListNode


def partition(head: Optional[ListNode], x: Any) -> Optional[ListNode]:
    """Put nodes less than x before the rest, keeping order within each group."""
    before = ListNode()
    after = ListNode()
    before_tail, after_tail = before, after
    node = head
    while node is not None:
        if node.val < x:
            before_tail.next = node
            before_tail = node
        else:
            after_tail.next = node
            after_tail = node
        node = node.next
    after_tail.next = None
    before_tail.next = after.next
    return before.next


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None:
        return

    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next

    prev: Optional[ListNode] = None
    curr = slow.next
    slow.next = None
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next

    first: Optional[ListNode] = head
    second = prev
    while second is not None:
        first_next = first.next
        second_next = second.next
        first.next = second
        second.next = first_next
        first = first_next
        second = second_next


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        a = prev.next
        b = a.next
        prev.next = b
        a.next = b.next
        b.next = a
        prev = a
    return dummy.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions (1-based) before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def sort_by_actual_values(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list that is sorted by absolute value into sorted order.

    Every negative node after the head is moved to the front, which
    reverses the negatives into ascending order.
    """
    if head is None or head.next is None:
        return head
    prev = head
    curr = head.next
    while curr is not None:
        if curr.val < 0:
            prev.next = curr.next
            curr.next = head
            head = curr
            curr = prev.next
        else:
            prev = curr
            curr = curr.next
    return head
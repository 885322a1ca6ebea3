"""Sorting singly linked lists by relinking their nodes."""

from __future__ import annotations

from typing import Optional

from linkedkit.nodes import ListNode


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list with insertion sort and return its new head.

    Nodes already in order are passed over without a search, so sorted
    input takes linear time.
    """
    dummy = ListNode(0, head)
    curr = head
    while curr is not None and curr.next is not None:
        if curr.next.val >= curr.val:
            curr = curr.next
            continue
        moving = curr.next
        curr.next = moving.next
        prev = dummy
        while prev.next.val < moving.val:
            prev = prev.next
        moving.next = prev.next
        prev.next = moving
    return dummy.next


def _quick_sort(head: Optional[ListNode]) -> tuple[Optional[ListNode], Optional[ListNode]]:
    """Sort the list and return its (head, tail)."""
    if head is None:
        return None, None
    if head.next is None:
        return head, head

    pivot = head.val
    less = ListNode()
    equal = ListNode()
    greater = ListNode()
    less_tail, equal_tail, greater_tail = less, equal, greater

    node = head
    while node is not None:
        if node.val < pivot:
            less_tail.next = node
            less_tail = node
        elif node.val == pivot:
            equal_tail.next = node
            equal_tail = node
        else:
            greater_tail.next = node
            greater_tail = node
        node = node.next
    less_tail.next = equal_tail.next = greater_tail.next = None

    sorted_less, sorted_less_tail = _quick_sort(less.next)
    sorted_greater, sorted_greater_tail = _quick_sort(greater.next)

    equal_tail.next = sorted_greater
    tail = sorted_greater_tail if sorted_greater is not None else equal_tail
    if sorted_less is None:
        return equal.next, tail
    sorted_less_tail.next = equal.next
    return sorted_less, tail


def quick_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list with quick sort, the head as pivot, and return its new head."""
    return _quick_sort(head)[0]
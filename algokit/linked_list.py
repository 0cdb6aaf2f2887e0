"""Singly linked lists and the classic algorithms that work on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    sentinel = ListNode()
    tail = sentinel
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return sentinel.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _walk(head)]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    new_head = None
    cur = head
    while cur is not None:
        nxt = cur.next
        cur.next = new_head
        new_head = cur
        cur = nxt
    return new_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes; ties take from ``list2`` first."""
    sentinel = ListNode()
    tail = sentinel
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return sentinel.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val``."""
    sentinel = ListNode(0, head)
    prev = sentinel
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return sentinel.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """In a sorted list, keep only the first node of each run of equal values."""
    cur = head
    while cur is not None and cur.next is not None:
        if cur.val == cur.next.val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return head


def delete_all_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """In a sorted list, drop every value that occurs more than once."""
    sentinel = ListNode(0, head)
    prev = sentinel
    cur = head
    while cur is not None:
        if cur.next is not None and cur.next.val == cur.val:
            repeated = cur.val
            while cur is not None and cur.val == repeated:
                cur = cur.next
            prev.next = cur
        else:
            prev = cur
            cur = cur.next
    return sentinel.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None

    start = head
    meet = fast
    while start is not meet:
        start = start.next
        meet = meet.next
    return meet


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    len_a = sum(1 for _ in _walk(head_a))
    len_b = sum(1 for _ in _walk(head_b))

    long_list, short_list = head_a, head_b
    if len_b > len_a:
        long_list, short_list = head_b, head_a

    for _ in range(abs(len_a - len_b)):
        long_list = long_list.next

    while long_list is not None:
        if long_list is short_list:
            return long_list
        long_list = long_list.next
        short_list = short_list.next
    return None


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list in ascending order by insertion, relinking its nodes."""
    if head is None or head.next is None:
        return head

    sorted_head = head
    cur = head.next
    sorted_head.next = None

    while cur is not None:
        nxt = cur.next
        if cur.val <= sorted_head.val:
            cur.next = sorted_head
            sorted_head = cur
        else:
            prev = sorted_head
            while prev.next is not None and prev.next.val < cur.val:
                prev = prev.next
            cur.next = prev.next
            prev.next = cur
        cur = nxt

    return sorted_head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways; the list is left unchanged."""
    slow = fast = head
    prev = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next

    if prev is None:
        return True

    prev.next = None
    back = reverse_list(slow)

    result = True
    front, rear = head, back
    while front is not None:
        if front.val != rear.val:
            result = False
            break
        front = front.next
        rear = rear.next

    prev.next = reverse_list(back)
    return result


def kth_node_from_end(head: Optional[ListNode], cnt: int) -> Optional[ListNode]:
    """Return the ``cnt``-th node counted from the end; ``cnt`` of 0 gives None.

    Raises ValueError for a negative count and IndexError when the list is
    shorter than ``cnt``.
    """
    if cnt < 0:
        raise ValueError("count must not be negative")
    fast = head
    for _ in range(cnt):
        if fast is None:
            raise IndexError("count exceeds list length")
        fast = fast.next

    slow = head
    while fast is not None:
        slow = slow.next
        fast = fast.next
    return slow


def kth_to_last(head: Optional[ListNode], k: int) -> int:
    """Return the value of the ``k``-th node from the end (``k`` starts at 1)."""
    node = kth_node_from_end(head, k)
    if node is None:
        raise IndexError("k must be at least 1")
    return node.val


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Put nodes below ``x`` before the others, keeping relative order in each part."""
    small = ListNode()
    large = ListNode()
    small_tail, large_tail = small, large

    for node in list(_walk(head)):
        if node.val < x:
            small_tail.next = node
            small_tail = node
        else:
            large_tail.next = node
            large_tail = node

    large_tail.next = None
    small_tail.next = large.next
    return small.next
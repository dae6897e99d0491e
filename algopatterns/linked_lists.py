"""Singly linked list problems: pointers moving at different speeds, splicing, reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order; None when there are none."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """The values of the list starting at head, in order."""
    return [] if head is None else list(head)


def middle_node(head: ListNode | None) -> ListNode | None:
    """The middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """The first node shared by both lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a: ListNode | None = head_a
    b: ListNode | None = head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0)
    tail = dummy
    node = head
    while node is not None:
        run_end = node
        while run_end.next is not None and run_end.next.val == node.val:
            run_end = run_end.next
        following = run_end.next
        if run_end is node:
            tail.next = node
            tail = node
        tail.next = following
        node = following
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end (1 is the last node)."""
    length = len(to_values(head))
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and the list length ({length})")
    dummy = ListNode(0, head)
    lead: ListNode | None = dummy
    for _ in range(n):
        lead = lead.next  # type: ignore[union-attr]
    trail = dummy
    while lead.next is not None:  # type: ignore[union-attr]
        lead = lead.next  # type: ignore[union-attr]
        trail = trail.next  # type: ignore[assignment]
    trail.next = trail.next.next  # type: ignore[union-attr]
    return dummy.next


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes; an odd last node stays in place."""
    dummy = ListNode(0, head)
    before = dummy
    while before.next is not None and before.next.next is not None:
        first = before.next
        second = first.next
        first.next = second.next
        second.next = first
        before.next = second
        before = first
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome_list(head: ListNode | None) -> bool:
    """Whether the list's values read the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]
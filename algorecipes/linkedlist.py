"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list. Iterating yields the values from here on."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list as a Python list."""
    return [] if head is None else list(head)


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in to_values(head))


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the values read the same forwards and backwards.

    The second half is reversed for the comparison and restored afterwards,
    so the list is left as it was found.
    """
    if head is None or head.next is None:
        return True

    slow: ListNode = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next

    second_half = reverse_list(slow)
    result = all(a == b for a, b in zip(head, second_half))  # type: ignore[arg-type]
    reverse_list(second_half)
    return result


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end and return the head."""
    count = _length(head)
    if not 1 <= n <= count:
        raise ValueError(f"n must be between 1 and {count}, got {n}")
    assert head is not None
    if n == count:
        return head.next
    prev = head
    for _ in range(count - n - 1):
        prev = prev.next  # type: ignore[assignment]
    prev.next = prev.next.next  # type: ignore[union-attr]
    return head


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry > 0:
        tail.next = ListNode(carry)
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """From a sorted list, drop every value that occurs more than once."""
    if head is None or head.next is None:
        return head

    dummy = ListNode(0, head)
    prev = dummy
    current: ListNode | None = head
    while current is not None:
        while current.next is not None and current.val == current.next.val:
            current = current.next
        if prev.next is current:
            prev = current
        else:
            prev.next = current.next
        current = current.next
    return dummy.next


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node whose value equals ``val``."""
    dummy = ListNode(0, head)
    current = dummy
    while current.next is not None:
        if current.next.val == val:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by ``k`` places."""
    if head is None or k == 0:
        return head

    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head

    steps_to_new_tail = length - k % length - 1
    new_tail = head
    for _ in range(steps_to_new_tail):
        new_tail = new_tail.next  # type: ignore[assignment]
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False
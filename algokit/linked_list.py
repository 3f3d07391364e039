"""Singly linked lists and a few classic rearrangements of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ListNode",
    "LinkedList",
    "from_iterable",
    "to_list",
    "swap_pairs",
    "rotate",
    "delete_duplicates",
    "add_numbers",
]


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: int
    next: Optional[ListNode] = None


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list that grows at its tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = None
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in _walk(self.head))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Chain ``values`` into nodes and return the head, or None when empty."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """Values of the chain starting at ``head``."""
    return [node.value for node in _walk(head)]


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two neighbouring nodes; return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next


def rotate(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list right by ``k`` places; return the new head."""
    if head is None:
        return None
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


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop nodes that repeat the value just before them; return the head."""
    node = head
    while node is not None:
        while node.next is not None and node.next.value == node.value:
            node.next = node.next.next
        node = node.next
    return head


def add_numbers(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    a, b = first, second
    while carry or a is not None or b is not None:
        if a is not None:
            carry += a.value
            a = a.next
        if b is not None:
            carry += b.value
            b = b.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next
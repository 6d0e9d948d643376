"""Singly linked lists of integers and operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists, giving a reversed digit list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry > 0:
        if l1 is not None:
            carry += l1.val
            l1 = l1.next
        if l2 is not None:
            carry += l2.val
            l2 = l2.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every value that occurs more than once from a sorted list."""
    dummy = ListNode(0, head)
    prev = dummy
    while head is not None:
        while head.next is not None and head.val == head.next.val:
            head = head.next
        if prev.next is head:
            prev = head
        else:
            prev.next = head.next
        head = head.next
    return dummy.next
"""Singly linked list node and palindrome checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class ListNode:
    """A node holding an integer and an optional successor."""

    val: int
    next: Optional[ListNode] = None

    def add(self, val: int) -> None:
        """Replace the successor with a new single node holding val."""
        self.next = make_node(val)

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        state = "some" if self.next is not None else "none"
        return f"LN={self.val} and {state} is"


def make_node(val: int) -> ListNode:
    """A single node holding val."""
    return ListNode(val)


def _values(head: Optional[ListNode]) -> list[int]:
    if head is None:
        raise ValueError("list must not be empty")
    return list(head)


def is_palindrome_node_optimized(head: Optional[ListNode]) -> bool:
    """True when the list's values read the same both ways."""
    values = _values(head)
    half = len(values) // 2
    return all(a == b for a, b in zip(values[:half], reversed(values)))


def is_palindrome_node(head: Optional[ListNode]) -> bool:
    """True when the list's values equal their reverse."""
    values = _values(head)
    return values == values[::-1]
"""Deep copy of a linked list whose nodes also carry a random pointer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of the list, ``random`` links included; the input is untouched."""
    if head is None:
        return None

    copies: dict[int, RandomNode] = {}
    node = head
    while node is not None:
        copies[id(node)] = RandomNode(node.val)
        node = node.next

    node = head
    while node is not None:
        copy = copies[id(node)]
        copy.next = copies[id(node.next)] if node.next is not None else None
        copy.random = copies[id(node.random)] if node.random is not None else None
        node = node.next

    return copies[id(head)]
"""Singly linked lists of ``ListNode`` with 1-based positional operations.

Functions that may change the first node return the (possibly new) head;
an empty list is represented by ``None``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: Any = 0
    next: Optional[ListNode] = field(default=None, repr=False)


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: Optional[ListNode], position: int) -> ListNode:
    for index, node in enumerate(_iter_nodes(head), start=1):
        if index == position:
            return node
    raise IndexError(f"position {position} is past the end of the list")


def _check_position(k: int) -> None:
    if k < 1:
        raise IndexError(f"positions start at 1, got {k}")


def insert_head(head: Optional[ListNode], value: Any) -> ListNode:
    """Put ``value`` in front of the list and return the new head."""
    return ListNode(value, head)


def insert_tail(head: Optional[ListNode], value: Any) -> ListNode:
    """Append ``value`` at the end and return the head."""
    new_tail = ListNode(value)
    if head is None:
        return new_tail
    *_, tail = _iter_nodes(head)
    tail.next = new_tail
    return head


def insert_at(head: Optional[ListNode], value: Any, k: int) -> ListNode:
    """Insert ``value`` so that it ends up at position ``k`` (1-based)."""
    _check_position(k)
    if k == 1:
        return insert_head(head, value)
    insert_after(_node_at(head, k - 1), value)
    assert head is not None
    return head


def insert_after(node: ListNode, value: Any) -> ListNode:
    """Insert ``value`` right after ``node`` and return the new node."""
    new_node = ListNode(value, node.next)
    node.next = new_node
    return new_node


def delete_head(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the first node and return the new head."""
    if head is None:
        return None
    new_head = head.next
    head.next = None
    return new_head


def delete_tail(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    new_tail = head
    while new_tail.next is not None and new_tail.next.next is not None:
        new_tail = new_tail.next
    new_tail.next = None
    return head


def delete_at(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Remove the node at position ``k`` (1-based) and return the head."""
    _check_position(k)
    if k == 1:
        if head is None:
            raise IndexError("cannot delete from an empty list")
        return delete_head(head)
    before = _node_at(head, k - 1)
    if before.next is None:
        raise IndexError(f"position {k} is past the end of the list")
    delete_after(before)
    return head


def delete_after(node: ListNode) -> None:
    """Unlink the node that follows ``node``."""
    removed = node.next
    if removed is None:
        raise ValueError("there is no node after this one")
    node.next = removed.next
    removed.next = None


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list from ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: Optional[ListNode]) -> Iterator[Any]:
    """Yield the values from head to tail."""
    for node in _iter_nodes(head):
        yield node.value


def length(head: Optional[ListNode]) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _iter_nodes(head))


def format_list(head: Optional[ListNode]) -> str:
    """Return the values, each followed by a tab."""
    return "".join(f"{value}\t" for value in iter_values(head))
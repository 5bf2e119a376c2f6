"""Doubly linked lists of ``DoublyNode`` with 1-based positional operations.

Functions that may change the first node return the (possibly new) head;
an empty list is represented by ``None``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class DoublyNode:
    """One node of a doubly linked list."""

    value: Any = 0
    prev: Optional[DoublyNode] = field(default=None, repr=False)
    next: Optional[DoublyNode] = field(default=None, repr=False)


def _iter_nodes(head: Optional[DoublyNode]) -> Iterator[DoublyNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: Optional[DoublyNode], position: int) -> DoublyNode:
    for index, node in enumerate(_iter_nodes(head), start=1):
        if index == position:
            return node
    raise IndexError(f"position {position} is past the end of the list")


def _check_position(k: int) -> None:
    if k < 1:
        raise IndexError(f"positions start at 1, got {k}")


def _unlink(node: DoublyNode) -> None:
    if node.prev is not None:
        node.prev.next = node.next
    if node.next is not None:
        node.next.prev = node.prev
    node.prev = None
    node.next = None


def insert_head(head: Optional[DoublyNode], value: Any) -> DoublyNode:
    """Put ``value`` in front of the list and return the new head."""
    new_head = DoublyNode(value, None, head)
    if head is not None:
        head.prev = new_head
    return new_head


def insert_tail(head: Optional[DoublyNode], value: Any) -> DoublyNode:
    """Append ``value`` at the end and return the head."""
    if head is None:
        return DoublyNode(value)
    *_, tail = _iter_nodes(head)
    insert_after(tail, value)
    return head


def insert_at(head: Optional[DoublyNode], value: Any, k: int) -> DoublyNode:
    """Insert ``value`` so that it ends up at position ``k`` (1-based)."""
    _check_position(k)
    if k == 1:
        return insert_head(head, value)
    insert_after(_node_at(head, k - 1), value)
    assert head is not None
    return head


def insert_after(node: DoublyNode, value: Any) -> DoublyNode:
    """Insert ``value`` right after ``node`` and return the new node."""
    new_node = DoublyNode(value, node, node.next)
    if node.next is not None:
        node.next.prev = new_node
    node.next = new_node
    return new_node


def insert_before(node: DoublyNode, value: Any) -> DoublyNode:
    """Insert ``value`` right before ``node`` and return the new node.

    When ``node`` was the head, the returned node is the new head.
    """
    new_node = DoublyNode(value, node.prev, node)
    if node.prev is not None:
        node.prev.next = new_node
    node.prev = new_node
    return new_node


def delete_head(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Remove the first node and return the new head."""
    if head is None:
        return None
    new_head = head.next
    _unlink(head)
    return new_head


def delete_tail(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    *_, tail = _iter_nodes(head)
    _unlink(tail)
    return head


def delete_at(head: Optional[DoublyNode], k: int) -> Optional[DoublyNode]:
    """Remove the node at position ``k`` (1-based) and return the head."""
    _check_position(k)
    if k == 1:
        if head is None:
            raise IndexError("cannot delete from an empty list")
        return delete_head(head)
    _unlink(_node_at(head, k))
    return head


def delete_after(node: DoublyNode) -> None:
    """Unlink the node that follows ``node``."""
    if node.next is None:
        raise ValueError("there is no node after this one")
    _unlink(node.next)


def delete_before(node: DoublyNode) -> None:
    """Unlink the node that precedes ``node``."""
    if node.prev is None:
        raise ValueError("there is no node before this one")
    _unlink(node.prev)


def from_iterable(values: Iterable[Any]) -> Optional[DoublyNode]:
    """Build a list from ``values`` and return its head."""
    head: Optional[DoublyNode] = None
    tail: Optional[DoublyNode] = None
    for value in values:
        if tail is None:
            head = tail = DoublyNode(value)
        else:
            tail = insert_after(tail, value)
    return head


def iter_values(head: Optional[DoublyNode]) -> Iterator[Any]:
    """Yield the values from head to tail."""
    for node in _iter_nodes(head):
        yield node.value


def length(head: Optional[DoublyNode]) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _iter_nodes(head))


def format_list(head: Optional[DoublyNode]) -> str:
    """Return the values, each followed by a tab."""
    return "".join(f"{value}\t" for value in iter_values(head))
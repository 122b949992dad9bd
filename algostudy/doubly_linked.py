"""A doubly linked list with reversal, node deletion and in-place quicksort."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class DoublyNode:
    """A list node; ``prev`` and ``next`` link it to its neighbours."""

    value: Any
    prev: Optional["DoublyNode"] = field(default=None, repr=False)
    next: Optional["DoublyNode"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A sequence of ``DoublyNode`` objects linked in both directions."""

    def __init__(self, values: Iterable = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        self._size = 0
        for value in values:
            if self.tail is None:
                self.push_front(value)
            else:
                self.insert_after(self.tail, value)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def _check_owned(self, node: DoublyNode) -> None:
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")

    def push_front(self, value) -> DoublyNode:
        """Insert ``value`` at the front and return its node."""
        node = DoublyNode(value, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def insert_after(self, node: DoublyNode, value) -> DoublyNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        self._check_owned(node)
        new = DoublyNode(value, node, node.next)
        if node.next is None:
            self.tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1
        return new

    def node_at(self, index: int) -> DoublyNode:
        """The node at position ``index``, counting from 0."""
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("list index out of range")

    def delete(self, node: DoublyNode) -> None:
        """Unlink ``node`` from the list."""
        self._check_owned(node)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        for node in list(self._nodes()):
            node.prev, node.next = node.next, node.prev
        self.head, self.tail = self.tail, self.head

    def quicksort(self) -> None:
        """Sort the values in place, partitioning around the last node's value."""
        if self.head is None:
            return
        pending: list[tuple[Optional[DoublyNode], Optional[DoublyNode]]] = [
            (self.head, self.tail)
        ]
        while pending:
            low, high = pending.pop()
            if high is None or low is high or low is high.next:
                continue
            split = _partition(low, high)
            pending.append((split.next, high))
            pending.append((low, split.prev))


def _partition(low: DoublyNode, high: DoublyNode) -> DoublyNode:
    pivot = high.value
    boundary = low.prev
    current = low
    while current is not high:
        if current.value <= pivot:
            boundary = low if boundary is None else boundary.next
            boundary.value, current.value = current.value, boundary.value
        current = current.next
    boundary = low if boundary is None else boundary.next
    boundary.value, high.value = high.value, boundary.value
    return boundary


def copy_with_random(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Copy a chain whose ``prev`` links point at arbitrary nodes of the chain.

    The copy keeps the ``next`` order, and each copied ``prev`` points at the
    copy of the node the original pointed at. The original is left unchanged.
    """
    originals: list[DoublyNode] = []
    node = head
    while node is not None:
        originals.append(node)
        node = node.next
    copies = {id(original): DoublyNode(original.value) for original in originals}
    for original in originals:
        copy = copies[id(original)]
        if original.next is not None:
            copy.next = copies[id(original.next)]
        if original.prev is not None:
            copy.prev = copies[id(original.prev)]
    return copies[id(head)] if head is not None else None
"""A singly linked list with the classic splitting, merging and reordering operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A list node holding a value and a link to the next node."""

    value: Any
    next: Optional["Node"] = field(default=None, repr=False)


def _split_front_back(head: Node) -> tuple[Node, Optional[Node]]:
    """Cut a chain in two halves; the extra node of an odd length stays in front."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    back = slow.next
    slow.next = None
    return head, back


def _merge(a: Optional[Node], b: Optional[Node]) -> Optional[Node]:
    """Splice two ascending chains into one ascending chain."""
    dummy = Node(None)
    tail = dummy
    while a is not None and b is not None:
        if a.value <= b.value:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def _merge_sort(head: Optional[Node]) -> Optional[Node]:
    if head is None or head.next is None:
        return head
    front, back = _split_front_back(head)
    return _merge(_merge_sort(front), _merge_sort(back))


def _reverse_chain(node: Optional[Node]) -> Optional[Node]:
    if node is None or node.next is None:
        return node
    rest = _reverse_chain(node.next)
    node.next.next = node
    node.next = None
    return rest


class LinkedList:
    """A chain of ``Node`` objects reached from ``head``."""

    def __init__(self, values: Iterable = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    @classmethod
    def _from_head(cls, head: Optional[Node]) -> "LinkedList":
        result = cls()
        result.head = head
        return result

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _check_other(self, other: "LinkedList") -> None:
        if other is self:
            raise ValueError("cannot combine a list with itself")

    def push(self, value) -> None:
        """Insert ``value`` at the front."""
        self.head = Node(value, self.head)

    def pop(self):
        """Remove and return the front value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        return node.value

    def remove_at(self, index: int):
        """Remove and return the value at position ``index``."""
        if index < 0 or self.head is None:
            raise IndexError("list index out of range")
        if index == 0:
            return self.pop()
        prev = self.head
        for _ in range(index - 1):
            prev = prev.next
            if prev is None:
                raise IndexError("list index out of range")
        target = prev.next
        if target is None:
            raise IndexError("list index out of range")
        prev.next = target.next
        return target.value

    def middle(self):
        """The middle value; of two middles, the second."""
        if self.head is None:
            raise IndexError("middle of empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def has_cycle(self) -> bool:
        """True when following the links never reaches the end."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def reverse(self) -> None:
        """Reverse the links in a single pass."""
        prev = None
        current = self.head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self.head = prev

    def reverse_recursive(self) -> None:
        """Reverse the links recursively."""
        self.head = _reverse_chain(self.head)

    def _insert_node_sorted(self, node: Node) -> None:
        prev = None
        current = self.head
        while current is not None and current.value < node.value:
            prev, current = current, current.next
        node.next = current
        if prev is None:
            self.head = node
        else:
            prev.next = node

    def sorted_insert(self, value) -> None:
        """Insert ``value`` into its place in an ascending list."""
        self._insert_node_sorted(Node(value))

    def insertion_sort(self) -> None:
        """Sort ascending by reinserting every node in order."""
        pending = self.head
        self.head = None
        while pending is not None:
            node, pending = pending, pending.next
            node.next = None
            self._insert_node_sorted(node)

    def append_list(self, other: Iterable) -> None:
        """Append copies of the values of ``other`` at the end."""
        values = list(other)
        if not values:
            return
        tail = None
        for tail in self._nodes():
            pass
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def front_back_split(self) -> tuple["LinkedList", "LinkedList"]:
        """Move the nodes into front and back halves; an odd extra node goes in front.

        This list is left empty.
        """
        if self.head is None:
            return LinkedList(), LinkedList()
        front, back = _split_front_back(self.head)
        self.head = None
        return self._from_head(front), self._from_head(back)

    def remove_duplicates(self) -> None:
        """Drop repeated values from an ascending list in one pass."""
        node = self.head
        while node is not None and node.next is not None:
            if node.next.value == node.value:
                node.next = node.next.next
            else:
                node = node.next

    def move_front_to(self, other: "LinkedList") -> None:
        """Move the front node of this list to the front of ``other``."""
        self._check_other(other)
        node = self.head
        if node is None:
            raise IndexError("move from empty list")
        self.head = node.next
        node.next = other.head
        other.head = node

    def alternating_split(self) -> tuple["LinkedList", "LinkedList"]:
        """Deal the nodes alternately into two lists, keeping their order.

        This list is left empty.
        """
        dummies = [Node(None), Node(None)]
        tails = list(dummies)
        for position, node in enumerate(list(self._nodes())):
            side = position % 2
            tails[side].next = node
            tails[side] = node
        for tail in tails:
            tail.next = None
        self.head = None
        return self._from_head(dummies[0].next), self._from_head(dummies[1].next)

    def shuffle_merge(self, other: "LinkedList") -> "LinkedList":
        """Interleave the nodes of both lists, starting with this one.

        Leftover nodes of the longer list follow; both inputs are left empty.
        """
        self._check_other(other)
        dummy = Node(None)
        tail = dummy
        a, b = self.head, other.head
        while a is not None and b is not None:
            tail.next, tail, a = a, a, a.next
            tail.next, tail, b = b, b, b.next
        tail.next = a if a is not None else b
        self.head = other.head = None
        return self._from_head(dummy.next)

    def sorted_merge(self, other: "LinkedList") -> "LinkedList":
        """Splice two ascending lists into one; both inputs are left empty."""
        self._check_other(other)
        merged = _merge(self.head, other.head)
        self.head = other.head = None
        return self._from_head(merged)

    def merge_sort(self) -> None:
        """Sort ascending with merge sort, relinking the nodes."""
        self.head = _merge_sort(self.head)

    def sorted_intersect(self, other: "LinkedList") -> "LinkedList":
        """A new list of the values common to two ascending lists."""
        common = []
        a, b = self.head, other.head
        while a is not None and b is not None:
            if a.value == b.value:
                common.append(a.value)
                a, b = a.next, b.next
            elif a.value < b.value:
                a = a.next
            else:
                b = b.next
        return LinkedList(common)

    def swap_kth(self, k: int) -> None:
        """Swap the k-th node from the front with the k-th node from the end."""
        if k < 1:
            raise ValueError("k must be positive")
        nodes = list(self._nodes())
        if k > len(nodes):
            raise IndexError("position is outside the list")
        i, j = k - 1, len(nodes) - k
        nodes[i], nodes[j] = nodes[j], nodes[i]
        self.head = nodes[0]
        for node, following in zip(nodes, nodes[1:]):
            node.next = following
        nodes[-1].next = None


def delete_node(node: Node) -> None:
    """Remove ``node`` from its chain given only the node itself.

    The next node's value is copied in and the next node unlinked, so the
    last node of a chain cannot be removed this way.
    """
    following = node.next
    if following is None:
        raise ValueError("the last node cannot be deleted this way")
    node.value = following.value
    node.next = following.next


def add_two_numbers(first: Iterable[int], second: Iterable[int]) -> LinkedList:
    """Sum of two numbers given as digit sequences, least significant digit first."""
    digits = []
    carry = 0
    for a, b in zip_longest(first, second, fillvalue=0):
        if not (0 <= a <= 9 and 0 <= b <= 9):
            raise ValueError("digits must be between 0 and 9")
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return LinkedList(digits)
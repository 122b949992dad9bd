"""FIFO queues built on a ring buffer, a linked deque and two stacks."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator, Sequence


class QueueEmpty(IndexError):
    """Raised when a value is requested from an empty queue."""


class QueueFull(OverflowError):
    """Raised when a value is added to a queue that has no room left."""


class ArrayQueue:
    """A bounded FIFO queue stored in a fixed-size ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Most values the queue can hold at once."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """True when the queue holds no values."""
        return self._size == 0

    def is_full(self) -> bool:
        """True when the queue has no room for another value."""
        return self._size == self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFull("queue is full")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        """The value at the front, left in place."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._slots[self._front]

    def rear(self) -> Any:
        """The value at the rear, left in place."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._slots[(self._front + self._size - 1) % self.capacity]


class LinkedQueue:
    """An unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """True when the queue holds no values."""
        return not self._items

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()


class StackQueue:
    """A FIFO queue made of two stacks.

    Values are pushed onto an inbox stack; when the outbox runs dry the
    whole inbox is moved over, which reverses it into FIFO order.
    """

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise QueueEmpty("queue is empty")
        return self._outbox.pop()


def petrol_start(pumps: Sequence[tuple[int, int]]) -> int:
    """First pump from which a truck can drive the whole circle, or -1.

    Each pump is a ``(petrol, distance to next pump)`` pair.
    """
    if not pumps:
        raise ValueError("need at least one pump")
    start = 0
    tank = 0
    shortfall = 0
    for index, (petrol, distance) in enumerate(pumps):
        tank += petrol - distance
        if tank < 0:
            shortfall += tank
            tank = 0
            start = index + 1
    if tank + shortfall < 0 or start >= len(pumps):
        return -1
    return start


def _binary_strings() -> Iterator[str]:
    pending = deque(["1"])
    while True:
        current = pending.popleft()
        yield current
        pending.append(current + "0")
        pending.append(current + "1")


def binary_numbers(count: int) -> list[str]:
    """Binary representations of 1 to ``count``, generated with a queue."""
    if count < 0:
        raise ValueError("count must be non-negative")
    generator = _binary_strings()
    return [next(generator) for _ in range(count)]
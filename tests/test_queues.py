import pytest

from algostudy.queues import (
    ArrayQueue,
    LinkedQueue,
    QueueEmpty,
    QueueFull,
    StackQueue,
    binary_numbers,
    petrol_start,
)


def test_array_queue_is_fifo():
    queue = ArrayQueue(4)
    for value in (5, 6, 7):
        queue.enqueue(value)
    assert queue.front() == 5
    assert queue.rear() == 7
    assert [queue.dequeue() for _ in range(3)] == [5, 6, 7]
    assert queue.is_empty()


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    queue.enqueue(4)
    assert queue.is_full()
    assert len(queue) == 3
    assert queue.rear() == 4
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]


def test_array_queue_full_raises():
    queue = ArrayQueue(1)
    queue.enqueue(10)
    with pytest.raises(QueueFull):
        queue.enqueue(11)
    assert queue.dequeue() == 10


def test_array_queue_empty_raises():
    queue = ArrayQueue(2)
    with pytest.raises(QueueEmpty):
        queue.dequeue()
    with pytest.raises(QueueEmpty):
        queue.front()
    with pytest.raises(QueueEmpty):
        queue.rear()
    assert len(queue) == 0


def test_array_queue_empty_after_draining_raises():
    queue = ArrayQueue(2)
    queue.enqueue(3)
    assert queue.dequeue() == 3
    with pytest.raises(QueueEmpty):
        queue.dequeue()
    assert queue.is_empty()


def test_array_queue_needs_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_linked_queue_is_fifo():
    queue = LinkedQueue()
    values = list(range(20))
    for value in values:
        queue.enqueue(value)
    assert len(queue) == 20
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_stack_queue_interleaved_is_fifo():
    queue = StackQueue()
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    queue.enqueue("c")
    assert len(queue) == 2
    assert queue.dequeue() == "b"
    assert queue.dequeue() == "c"
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_petrol_start_source_example():
    assert petrol_start([(6, 4), (3, 6), (7, 3)]) == 2


def test_petrol_start_without_solution():
    assert petrol_start([(1, 5), (2, 3)]) == -1


def test_petrol_start_rejects_empty():
    with pytest.raises(ValueError):
        petrol_start([])


def test_binary_numbers_round_trip():
    result = binary_numbers(50)
    assert len(result) == 50
    assert [int(text, 2) for text in result] == list(range(1, 51))


def test_binary_numbers_zero_and_negative():
    assert binary_numbers(0) == []
    with pytest.raises(ValueError):
        binary_numbers(-1)
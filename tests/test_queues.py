import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsprimer.queues import (
    ArrayQueue,
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_array_queue_starts_empty():
    queue = ArrayQueue(10)
    assert queue.is_empty() is True
    assert len(queue) == 0


def test_array_queue_overflow_and_dequeue():
    queue = ArrayQueue(10)
    values = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    for value in values:
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(110)
    assert queue.dequeue() == 10
    assert list(queue) == values[1:]
    assert queue.is_full() is True


def test_array_queue_empty_dequeue_raises():
    with pytest.raises(QueueEmptyError):
        ArrayQueue(3).dequeue()


def test_array_queue_negative_size():
    with pytest.raises(ValueError):
        ArrayQueue(-1)


def test_circular_queue_source_scenario():
    queue = CircularQueue(5)
    assert queue.is_empty() is True
    for value in (10, 20, 30, 40):
        queue.enqueue(value)
    assert queue.dequeue() == 10
    queue.enqueue(50)
    assert list(queue) == [20, 30, 40, 50]
    assert queue.is_full() is True
    assert len(queue) == 4


def test_circular_queue_full_raises():
    queue = CircularQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError):
        queue.enqueue(3)


def test_circular_queue_empty_raises():
    with pytest.raises(QueueEmptyError):
        CircularQueue(4).dequeue()


def test_circular_queue_bad_size():
    with pytest.raises(ValueError):
        CircularQueue(0)


@given(st.lists(st.integers(), max_size=50))
def test_circular_queue_reuses_space(values):
    queue = CircularQueue(4)
    out = []
    for value in values:
        if queue.is_full():
            out.append(queue.dequeue())
        queue.enqueue(value)
    while not queue.is_empty():
        out.append(queue.dequeue())
    assert out == values


def test_linked_queue_source_scenario():
    queue = LinkedQueue()
    for value in (10, 20, 30, 40, 50):
        queue.enqueue(value)
    assert list(queue) == [10, 20, 30, 40, 50]
    for expected in (10, 20, 30, 40):
        assert queue.dequeue() == expected
    assert list(queue) == [50]
    assert len(queue) == 1


def test_linked_queue_empty_raises():
    queue = LinkedQueue()
    assert queue.is_empty() is True
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_linked_queue_refills_after_drain():
    queue = LinkedQueue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]


@given(st.lists(st.integers()))
def test_linked_queue_fifo(values):
    queue = LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty() is True
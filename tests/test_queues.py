import pytest

from dsakit.errors import CapacityError, EmptyError
from dsakit.queues import AmortizedStackQueue, ArrayQueue, EagerStackQueue


def _fill(queue, values):
    for value in values:
        queue.push(value)
    return queue


def _drain(queue):
    return [queue.pop() for _ in range(len(queue))]


def test_array_queue_first_in_first_out():
    queue = _fill(ArrayQueue(), [3, 1, 4, 1, 5])
    assert len(queue) == 5
    assert _drain(queue) == [3, 1, 4, 1, 5]
    assert queue.is_empty()


def test_eager_queue_first_in_first_out():
    queue = _fill(EagerStackQueue(), [3, 1, 4, 1, 5])
    assert len(queue) == 5
    assert _drain(queue) == [3, 1, 4, 1, 5]
    assert queue.is_empty()


def test_amortized_queue_first_in_first_out():
    queue = _fill(AmortizedStackQueue(), [3, 1, 4, 1, 5])
    assert len(queue) == 5
    assert _drain(queue) == [3, 1, 4, 1, 5]
    assert queue.is_empty()


def test_array_queue_front_does_not_remove():
    queue = _fill(ArrayQueue(), ["a", "b"])
    assert queue.front() == "a"
    assert len(queue) == 2
    assert queue.pop() == "a"
    assert queue.front() == "b"


def test_eager_queue_front_does_not_remove():
    queue = _fill(EagerStackQueue(), ["a", "b"])
    assert queue.front() == "a"
    assert len(queue) == 2
    assert queue.pop() == "a"
    assert queue.front() == "b"


def test_amortized_queue_front_does_not_remove():
    queue = _fill(AmortizedStackQueue(), ["a", "b"])
    assert queue.front() == "a"
    assert len(queue) == 2
    assert queue.pop() == "a"
    assert queue.front() == "b"


def test_array_queue_interleaved_operations_keep_order():
    queue = _fill(ArrayQueue(), [1, 2])
    assert queue.pop() == 1
    _fill(queue, [3, 4])
    assert _drain(queue) == [2, 3, 4]
    assert len(queue) == 0


def test_eager_queue_interleaved_operations_keep_order():
    queue = _fill(EagerStackQueue(), [1, 2])
    assert queue.pop() == 1
    _fill(queue, [3, 4])
    assert _drain(queue) == [2, 3, 4]
    assert len(queue) == 0


def test_amortized_queue_interleaved_operations_keep_order():
    queue = _fill(AmortizedStackQueue(), [1, 2])
    assert queue.pop() == 1
    _fill(queue, [3, 4])
    assert _drain(queue) == [2, 3, 4]
    assert len(queue) == 0


@pytest.mark.parametrize(
    "operation, message", [("pop", "Underflow"), ("front", "Queue is Empty")]
)
def test_empty_array_queue_raises(operation, message):
    queue = ArrayQueue()
    assert queue.is_empty()
    with pytest.raises(EmptyError, match=message):
        getattr(queue, operation)()


@pytest.mark.parametrize(
    "operation, message", [("pop", "Underflow"), ("front", "Queue is Empty")]
)
def test_empty_eager_queue_raises(operation, message):
    queue = EagerStackQueue()
    assert queue.is_empty()
    with pytest.raises(EmptyError, match=message):
        getattr(queue, operation)()


@pytest.mark.parametrize(
    "operation, message", [("pop", "Underflow"), ("front", "Queue is Empty")]
)
def test_empty_amortized_queue_raises(operation, message):
    queue = AmortizedStackQueue()
    assert queue.is_empty()
    with pytest.raises(EmptyError, match=message):
        getattr(queue, operation)()


OPERATIONS = ["push", "push", "pop", "push", "push", "pop", "pop", "push", "pop"]


def _pop_trace(queue):
    popped = []
    sizes = []
    for step, operation in enumerate(OPERATIONS):
        if operation == "push":
            queue.push(step)
        else:
            popped.append(queue.pop())
        sizes.append(len(queue))
    return popped, sizes


def test_eager_queue_matches_array_queue():
    assert _pop_trace(EagerStackQueue()) == _pop_trace(ArrayQueue())


def test_amortized_queue_matches_array_queue():
    assert _pop_trace(AmortizedStackQueue()) == _pop_trace(ArrayQueue())


def test_array_queue_overflow():
    queue = ArrayQueue(2)
    queue.push(1)
    queue.push(2)
    with pytest.raises(CapacityError, match="Overflow"):
        queue.push(3)
    assert len(queue) == 2
    assert queue.front() == 1


def test_array_queue_reuses_freed_space():
    queue = _fill(ArrayQueue(3), [1, 2, 3])
    assert queue.pop() == 1
    queue.push(4)
    assert _drain(queue) == [2, 3, 4]


def test_array_queue_default_capacity():
    queue = ArrayQueue()
    assert queue.capacity == 100
    for value in range(100):
        queue.push(value)
    with pytest.raises(CapacityError):
        queue.push(100)


def test_array_queue_negative_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(-5)
"""Stacks: a fixed-capacity one and one built on a single queue."""

from collections import deque
from typing import Generic, TypeVar

from dsakit.errors import CapacityError, EmptyError

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class _Container(Generic[T]):
    """Shared emptiness checks; subclasses supply ``__len__`` and ``is_empty``."""

    _peek_message = "Stack is empty"

    def _require_items(self, *, peek: bool = False) -> None:
        if len(self) == 0:  # type: ignore[arg-type]
            raise EmptyError(self._peek_message) if peek else EmptyError()


class _Bounded(_Container[T]):
    """Container that refuses to grow beyond a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def _reserve_slot(self) -> None:
        if len(self) >= self._capacity:  # type: ignore[arg-type]
            raise CapacityError()


class ArrayStack(_Bounded[T]):
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._reserve_slot()
        self._items.append(value)

    def pop(self) -> T:
        self._require_items()
        return self._items.pop()

    def top(self) -> T:
        self._require_items(peek=True)
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


class QueueStack(_Container[T]):
    """LIFO stack kept in one FIFO queue, rotated on every push."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def push(self, value: T) -> None:
        earlier = len(self._queue)
        self._queue.append(value)
        self._queue.rotate(-earlier)

    def pop(self) -> T:
        self._require_items()
        return self._queue.popleft()

    def top(self) -> T:
        self._require_items(peek=True)
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)

    def is_empty(self) -> bool:
        return not self._queue
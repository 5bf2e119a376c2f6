"""Queues: a fixed-capacity one and two built from a pair of stacks."""

from collections import deque
from typing import TypeVar

from dsakit.stacks import DEFAULT_CAPACITY, _Bounded, _Container

T = TypeVar("T")


class _QueueMessages:
    _peek_message = "Queue is Empty"


class ArrayQueue(_QueueMessages, _Bounded[T]):
    """FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)
        self._items: deque[T] = deque()

    def push(self, value: T) -> None:
        self._reserve_slot()
        self._items.append(value)

    def pop(self) -> T:
        self._require_items()
        return self._items.popleft()

    def front(self) -> T:
        self._require_items(peek=True)
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


class EagerStackQueue(_QueueMessages, _Container[T]):
    """Queue on two stacks that keeps the oldest item on top after each push."""

    def __init__(self) -> None:
        self._main: list[T] = []
        self._spare: list[T] = []

    @staticmethod
    def _move_all(source: list[T], target: list[T]) -> None:
        while source:
            target.append(source.pop())

    def push(self, value: T) -> None:
        self._move_all(self._main, self._spare)
        self._main.append(value)
        self._move_all(self._spare, self._main)

    def pop(self) -> T:
        self._require_items()
        return self._main.pop()

    def front(self) -> T:
        self._require_items(peek=True)
        return self._main[-1]

    def __len__(self) -> int:
        return len(self._main)

    def is_empty(self) -> bool:
        return not self._main


class AmortizedStackQueue(_QueueMessages, _Container[T]):
    """Queue on an input and an output stack, refilled only when drained."""

    def __init__(self) -> None:
        self._incoming: list[T] = []
        self._outgoing: list[T] = []

    def _ready_output(self, *, peek: bool = False) -> list[T]:
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        self._require_items(peek=peek)
        return self._outgoing

    def push(self, value: T) -> None:
        self._incoming.append(value)

    def pop(self) -> T:
        return self._ready_output().pop()

    def front(self) -> T:
        return self._ready_output(peek=True)[-1]

    def __len__(self) -> int:
        return len(self._incoming) + len(self._outgoing)

    def is_empty(self) -> bool:
        return not self._incoming and not self._outgoing
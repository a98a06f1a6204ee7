"""Ring-buffer FIFO queue that doubles its capacity when full."""

from typing import TypeVar, Generic, List, Optional

T = TypeVar('T')

INITIAL_CAPACITY = 4


class Queue(Generic[T]):
    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity: int = capacity
        self._slots: List[Optional[T]] = [None] * capacity
        self._head: int = 0
        self._count: int = 0

    def enqueue(self, value: T) -> None:
        if self._count == self._capacity:
            self._resize(self._capacity * 2)
        self._slots[(self._head + self._count) % self._capacity] = value
        self._count += 1

    def dequeue(self) -> T:
        if self._count == 0:
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return value

    def front(self) -> T:
        if self._count == 0:
            raise IndexError("front from empty queue")
        return self._slots[self._head]

    def back(self) -> T:
        if self._count == 0:
            raise IndexError("back from empty queue")
        return self._slots[(self._head + self._count - 1) % self._capacity]

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._head = 0
        self._count = 0

    def copy(self) -> 'Queue[T]':
        """Shallow copy, compacted so the clone's head starts at slot 0."""
        clone: Queue[T] = Queue(self._capacity)
        for i in range(self._count):
            clone._slots[i] = self._slots[(self._head + i) % self._capacity]
        clone._count = self._count
        return clone

    def _resize(self, capacity: int) -> None:
        slots: List[Optional[T]] = [None] * capacity
        for i in range(self._count):
            slots[i] = self._slots[(self._head + i) % self._capacity]
        self._slots = slots
        self._head = 0
        self._capacity = capacity

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        items = [self._slots[(self._head + i) % self._capacity] for i in range(self._count)]
        return f"Queue({items})"

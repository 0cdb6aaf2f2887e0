"""Small container types: a min-tracking stack, a bounded ring queue, and
a stack and a queue each built from two of the other kind."""

from __future__ import annotations

from collections import deque


class MinStack:
    """A stack of integers that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` on top of the stack."""
        self._items.append(val)
        # Equal values are recorded too, so popping one of them keeps the minimum.
        if not self._mins or self._mins[-1] >= val:
            self._mins.append(val)

    def pop(self) -> None:
        """Remove the top element; raise IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        if self._items.pop() == self._mins[-1]:
            self._mins.pop()

    def top(self) -> int:
        """Return the top element; raise IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element; raise IndexError when the stack is empty."""
        if not self._mins:
            raise IndexError("minimum of empty stack")
        return self._mins[-1]


class CircularQueue:
    """A FIFO queue holding at most ``k`` values.

    Operations report failure instead of raising: ``enqueue`` and ``dequeue``
    return False, ``front`` and ``rear`` return -1.
    """

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: int) -> bool:
        """Append ``value``; return False if the queue is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def dequeue(self) -> bool:
        """Drop the front value; return False if the queue is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def front(self) -> int:
        """Return the front value, or -1 when empty."""
        return self._items[0] if self._items else -1

    def rear(self) -> int:
        """Return the last value, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity


class QueueStack:
    """A LIFO stack built on two FIFO queues."""

    def __init__(self) -> None:
        self._q1: deque[int] = deque()
        self._q2: deque[int] = deque()

    def _active(self) -> tuple[deque[int], deque[int]]:
        if self._q1:
            return self._q1, self._q2
        return self._q2, self._q1

    def push(self, x: int) -> None:
        """Push ``x`` onto the stack."""
        active, _ = self._active()
        active.append(x)

    def pop(self) -> int:
        """Remove and return the top element; raise IndexError when empty."""
        active, spare = self._active()
        if not active:
            raise IndexError("pop from empty stack")
        while len(active) > 1:
            spare.append(active.popleft())
        return active.popleft()

    def top(self) -> int:
        """Return the top element; raise IndexError when empty."""
        active, _ = self._active()
        if not active:
            raise IndexError("top of empty stack")
        return active[-1]

    def empty(self) -> bool:
        return not self._q1 and not self._q2


class StackQueue:
    """A FIFO queue built on two LIFO stacks."""

    def __init__(self) -> None:
        self._incoming: list[int] = []
        self._outgoing: list[int] = []

    def push(self, x: int) -> None:
        """Append ``x`` to the back of the queue."""
        self._incoming.append(x)

    def peek(self) -> int:
        """Return the front element; raise IndexError when empty."""
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        if not self._outgoing:
            raise IndexError("peek at empty queue")
        return self._outgoing[-1]

    def pop(self) -> int:
        """Remove and return the front element; raise IndexError when empty."""
        front = self.peek()
        self._outgoing.pop()
        return front

    def empty(self) -> bool:
        return not self._incoming and not self._outgoing
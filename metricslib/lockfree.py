"""Unbounded thread-safe FIFO queue and LIFO stack with non-blocking pop."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class LockFreeQueue(Generic[T]):
    """Unbounded multi-producer multi-consumer FIFO queue.

    ``try_pop`` returns ``None`` when the queue is empty.
    """

    def __init__(self) -> None:
        # deque.append and deque.popleft are atomic, so no lock is needed.
        self._items: Deque[T] = deque()

    def push(self, value: T) -> None:
        """Add ``value`` at the tail."""
        self._items.append(value)

    def try_pop(self) -> Optional[T]:
        """Remove and return the head value, or ``None`` if empty."""
        try:
            return self._items.popleft()
        except IndexError:
            return None


class LockFreeStack(Generic[T]):
    """Unbounded multi-producer multi-consumer LIFO stack.

    ``try_pop`` returns ``None`` when the stack is empty.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def try_pop(self) -> Optional[T]:
        """Remove and return the top value, or ``None`` if empty."""
        try:
            return self._items.pop()
        except IndexError:
            return None
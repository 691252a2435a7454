"""Base classes for thread-safe metrics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from metricslib.lockfree import LockFreeQueue, LockFreeStack

T = TypeVar("T")


class Metric(ABC):
    """Interface shared by every metric."""

    @abstractmethod
    def aggregate_and_reset(self) -> str:
        """Fold every recorded value into a string and forget them."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The name the metric is reported under."""


class OrderedMetricBase(Metric, Generic[T]):
    """Base for metrics whose recorded values are kept in arrival order."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._buffer: LockFreeQueue[T] = LockFreeQueue()

    def record(self, value: T) -> None:
        """Store one event's value."""
        self._buffer.push(value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def buffer(self) -> LockFreeQueue[T]:
        """The FIFO queue that holds values not yet aggregated."""
        return self._buffer


class UnorderedMetricBase(Metric, Generic[T]):
    """Base for metrics that do not care about the order of recorded values."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._buffer: LockFreeStack[T] = LockFreeStack()

    def record(self, value: T) -> None:
        """Store one event's value."""
        self._buffer.push(value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def buffer(self) -> LockFreeStack[T]:
        """The LIFO stack that holds values not yet aggregated."""
        return self._buffer
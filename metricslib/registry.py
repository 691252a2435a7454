"""Process-wide registry of metrics."""

from __future__ import annotations

import threading
from typing import Any, Callable, List, Optional, TypeVar

from metricslib.metric import Metric

M = TypeVar("M", bound=Metric)


class Registry:
    """Keeps every registered metric, in registration order."""

    _instance: Optional["Registry"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._metrics: List[Metric] = []

    @classmethod
    def instance(cls) -> "Registry":
        """Return the shared registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register(self, metric_type: Callable[..., M], *args: Any, **kwargs: Any) -> M:
        """Build a metric from the arguments, keep it and return it."""
        metric = metric_type(*args, **kwargs)
        with self._lock:
            self._metrics.append(metric)
        return metric

    def get_metrics(self) -> List[Metric]:
        """Return a snapshot of the registered metrics."""
        with self._lock:
            return list(self._metrics)

    def clear(self) -> None:
        """Forget every registered metric."""
        with self._lock:
            self._metrics.clear()


def get_metrics() -> List[Metric]:
    """Return the metrics of the shared registry."""
    return Registry.instance().get_metrics()


def register_metric(metric_type: Callable[..., M], *args: Any, **kwargs: Any) -> M:
    """Register a new metric in the shared registry."""
    return Registry.instance().register(metric_type, *args, **kwargs)
"""Background writer that appends metric snapshots to a file."""

from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, Optional, Union

from metricslib.metric import Metric
from metricslib.registry import get_metrics


def format_snapshot(metrics: Iterable[Metric], now: datetime) -> str:
    """Aggregate and reset each metric, returning one timestamped line."""
    parts = [f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"]
    for metric in metrics:
        parts.append(f'"{metric.name}" {metric.aggregate_and_reset()}')
    return " ".join(parts)


class MetricsWriter:
    """Periodically appends the state of all registered metrics to a file.

    Must be started and stopped explicitly, or used as a context manager.
    """

    def __init__(
        self,
        filename: Union[str, Path],
        interval: Union[float, timedelta] = 1.0,
    ) -> None:
        self._path = Path(filename)
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        self._interval = float(interval)
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        # Create the file up front so an unusable path fails here.
        with self._path.open("a", encoding="utf-8"):
            pass

    def start(self) -> None:
        """Start writing in a background thread; does nothing if running."""
        with self._lock:
            if self._thread is not None:
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._write_loop, name="metrics-writer", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it; does nothing if stopped."""
        with self._lock:
            thread, self._thread = self._thread, None
            if thread is None:
                return
            self._stop_event.set()
            thread.join()

    def __enter__(self) -> "MetricsWriter":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _write_loop(self) -> None:
        next_wake = time.monotonic()
        with self._path.open("a", encoding="utf-8") as file:
            while not self._stop_event.is_set():
                file.write(format_snapshot(get_metrics(), datetime.now()) + "\n")
                file.flush()
                next_wake += self._interval
                if self._stop_event.wait(max(0.0, next_wake - time.monotonic())):
                    break
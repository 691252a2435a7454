"""Demonstration workloads that feed metrics and log them to a file."""

from __future__ import annotations

import argparse
import random
import threading
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from metricslib.aggregates import AverageMetric, CountMetric
from metricslib.metric import OrderedMetricBase
from metricslib.registry import register_metric
from metricslib.writer import MetricsWriter

T = TypeVar("T")

_WORKERS = 4
_CPU_HTTP_PERIOD = 0.1
_CUSTOM_PERIOD = 0.25
_CUSTOM_STARTS = (0, 1000, 2000, 3000)


class SequenceMetric(OrderedMetricBase[T]):
    """Reports every value recorded since the last report, in arrival order."""

    def aggregate_and_reset(self) -> str:
        values: List[str] = []
        while (value := self.buffer.try_pop()) is not None:
            values.append(str(value))
        return "[" + ", ".join(values) + "]"


def _run_workers(targets: Sequence[Callable[[], None]]) -> None:
    threads = [threading.Thread(target=target) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def run_cpu_http(
    path: Union[str, Path], duration: float
) -> Tuple[AverageMetric, AverageMetric, CountMetric]:
    """Record random CPU loads and request counts from four threads.

    Returns the three registered metrics.
    """
    cpu1 = register_metric(AverageMetric, "CPU1", float)
    cpu2 = register_metric(AverageMetric, "CPU2", float)
    rps = register_metric(CountMetric, "HTTP requests RPS", int)

    end = time.monotonic() + duration

    def work() -> None:
        rng = random.Random()
        while time.monotonic() < end:
            cpu1.record(rng.uniform(0.0, 2.0))
            cpu2.record(rng.uniform(0.0, 2.0))
            rps.record(rng.randint(0, 100))
            time.sleep(_CPU_HTTP_PERIOD)

    with MetricsWriter(path):
        _run_workers([work] * _WORKERS)
    return cpu1, cpu2, rps


def run_custom(
    path: Union[str, Path], duration: float
) -> Tuple[SequenceMetric, SequenceMetric]:
    """Record increasing counters from four threads, split by parity.

    Returns the even and odd sequence metrics.
    """
    seq_even: SequenceMetric[int] = register_metric(SequenceMetric, "Even")
    seq_odd: SequenceMetric[int] = register_metric(SequenceMetric, "Odd")

    end = time.monotonic() + duration

    def make_worker(start: int) -> Callable[[], None]:
        def work() -> None:
            value = start
            while time.monotonic() < end:
                value += 1
                target = seq_even if value % 2 == 0 else seq_odd
                target.record(value)
                time.sleep(_CUSTOM_PERIOD)

        return work

    with MetricsWriter(path):
        _run_workers([make_worker(start) for start in _CUSTOM_STARTS])
    return seq_even, seq_odd


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstration workloads."""
    parser = argparse.ArgumentParser(
        prog="metricslib-demo",
        description="Feed metrics from worker threads and log them periodically.",
    )
    parser.add_argument(
        "workload",
        choices=("cpu-http", "custom"),
        help="which workload to run",
    )
    parser.add_argument(
        "--output", default="example.log", help="file the snapshots are appended to"
    )
    parser.add_argument(
        "--duration", type=float, default=15.0, help="seconds the workers run"
    )
    args = parser.parse_args(argv)

    if args.duration < 0:
        parser.error("--duration must not be negative")

    if args.workload == "cpu-http":
        run_cpu_http(args.output, args.duration)
    else:
        run_custom(args.output, args.duration)
    return 0
"""Ready-made metrics: sum and average of recorded values."""

from __future__ import annotations

from typing import Any, Callable

from metricslib.metric import UnorderedMetricBase


def _to_string(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def _divide(total: Any, count: int) -> Any:
    if isinstance(total, int) and not isinstance(total, bool):
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return total / count


class CountMetric(UnorderedMetricBase):
    """Reports the sum of the values recorded since the last report."""

    def __init__(self, name: str, value_type: Callable[..., Any] = int) -> None:
        super().__init__(name)
        self._value_type = value_type

    def aggregate_and_reset(self) -> str:
        total = self._value_type()
        while (value := self.buffer.try_pop()) is not None:
            total += self._value_type(value)
        return _to_string(total)


class AverageMetric(UnorderedMetricBase):
    """Reports the mean of the values recorded since the last report."""

    def __init__(self, name: str, value_type: Callable[..., Any] = float) -> None:
        super().__init__(name)
        self._value_type = value_type

    def aggregate_and_reset(self) -> str:
        total = self._value_type()
        count = 0
        while (value := self.buffer.try_pop()) is not None:
            total += self._value_type(value)
            count += 1
        average = _divide(total, count) if count else self._value_type()
        return _to_string(average)
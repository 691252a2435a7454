# metricslib

Thread-safe, in-process metrics that many threads can record into at once.
A background writer aggregates every registered metric and appends the
result to a log file at a fixed interval.

## Installation

```
pip install .
```

## Recording metrics

Register metrics once, then call `record` from any thread:

```python
from metricslib.registry import register_metric
from metricslib.aggregates import AverageMetric, CountMetric
from metricslib.writer import MetricsWriter

cpu = register_metric(AverageMetric, "CPU1", float)
rps = register_metric(CountMetric, "HTTP requests RPS", int)

cpu.record(0.75)
rps.record(42)

with MetricsWriter("example.log", interval=1.0):
    ...  # keep recording from worker threads
```

`MetricsWriter(filename, interval=1.0)` opens the file for appending when it
is constructed, so an unusable path fails straight away. `interval` is in
seconds and may also be a `datetime.timedelta`. Once started, the writer
appends one line immediately and then one line per interval: a local
timestamp with milliseconds, then each registered metric as its quoted name
followed by its aggregated value, for example:

```
2024-05-01 12:00:00.123 "CPU1" 0.750000 "HTTP requests RPS" 42
```

`start()` and `stop()` drive the writer by hand; both do nothing if it is
already running or already stopped. `stop()` waits for the background thread
to finish. Used as a context manager, the writer starts on entry and stops on
exit.

`metricslib.writer.format_snapshot(metrics, now)` builds one such line from
any iterable of metrics and a `datetime`, aggregating (and so resetting) each
metric in turn.

Aggregation drains the recorded values, so each line covers only what was
recorded since the previous one.

- `CountMetric(name, value_type=int)` writes the sum of the recorded values.
- `AverageMetric(name, value_type=float)` writes their mean, or zero when
  nothing was recorded. With `value_type=int` the mean is truncated toward
  zero.

Each recorded value is passed through `value_type` before it is added up.
Floats are written with six decimal places; other values with `str`.

## Custom metrics

Subclass `OrderedMetricBase` when the order of recorded values matters (it
buffers into a FIFO queue) or `UnorderedMetricBase` when it does not (it
buffers into a LIFO stack). Implement `aggregate_and_reset`, draining
`self.buffer` with `try_pop()`:

```python
from metricslib.metric import OrderedMetricBase

class LastValue(OrderedMetricBase):
    def aggregate_and_reset(self):
        last = None
        while (value := self.buffer.try_pop()) is not None:
            last = value
        return str(last)
```

Both bases take the metric's name and expose it as the `name` property. Since
`try_pop()` signals an empty buffer with `None`, `None` should not be
recorded as a value.

`metricslib.demo.SequenceMetric` is a complete example that writes the
recorded values as a list, such as `[2, 4, 1002]`.

## The registry

`metricslib.registry.Registry.instance()` is the process-wide registry the
writer reads from.

- `register_metric(metric_type, *args, **kwargs)` constructs a metric,
  registers it and returns it.
- `get_metrics()` returns a copy of the registered metrics in registration
  order.
- `Registry.instance().clear()` forgets every registered metric.

Registration is safe from several threads at once.

## Containers

`metricslib.lockfree` provides `LockFreeQueue` (FIFO) and `LockFreeStack`
(LIFO). Both are unbounded, safe to share between threads, and offer
`push(value)` and `try_pop()`, which returns `None` when the container is
empty.

`metricslib.intrusive_list` provides a circular doubly-linked `IntrusiveList`
of `IntrusiveListNode` objects. It supports pushing and popping at both ends,
peeking with `try_front()` and `try_back()`, iteration, and constant-time
`append` and `swap`. A node can be in only one list at a time; linking a
linked node raises `ValueError`, and the `*_non_empty` methods raise
`IndexError` on an empty list.

## Demo

```
metricslib-demo cpu-http
metricslib-demo custom --output custom.log --duration 5
```

- `cpu-http` runs four threads that, every 0.1 s, record a random CPU load
  between 0 and 2 into the averages `CPU1` and `CPU2` and a random request
  count between 0 and 100 into the sum `HTTP requests RPS`.
- `custom` runs four threads with counters starting at 0, 1000, 2000 and
  3000; every 0.25 s each increments its counter and records it into the
  `Even` or `Odd` sequence metric.

`--output` names the log file (default `example.log`) and `--duration` the
number of seconds the workers run (default 15; it must not be negative). The
writer logs once per second while the workers run.

## What it does not do

Metrics live only in the running process and are written only to a local
log file. The package has no exporter to a monitoring server, no network
endpoint, and nothing that reads the log files back.
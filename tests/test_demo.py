import re

import pytest

from metricslib.demo import SequenceMetric, main, run_cpu_http, run_custom
from metricslib.registry import Registry, get_metrics

TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3} ")
FIELD = re.compile(r'"([^"]+)" (\[[^\]]*\]|\S+)')


@pytest.fixture(autouse=True)
def clean_registry():
    Registry.instance().clear()
    yield
    Registry.instance().clear()


def _parse_lines(path):
    lines = path.read_text(encoding="utf-8").splitlines()
    return [dict(FIELD.findall(line)) for line in lines], lines


def _parse_sequence(text):
    inner = text[1:-1]
    return [int(part) for part in inner.split(", ")] if inner else []


def test_sequence_metric_keeps_order_and_resets():
    metric = SequenceMetric("seq")
    metric.record(2)
    metric.record(4)
    metric.record(6)
    assert metric.aggregate_and_reset() == "[2, 4, 6]"
    assert metric.aggregate_and_reset() == "[]"


def test_sequence_metric_name():
    metric = SequenceMetric("Even")
    assert metric.name == "Even"


def test_run_custom_writes_parity_sequences(tmp_path):
    path = tmp_path / "custom.log"
    seq_even, seq_odd = run_custom(path, 1.2)

    assert [m.name for m in get_metrics()] == ["Even", "Odd"]

    records, lines = _parse_lines(path)
    assert len(lines) >= 2
    for line in lines:
        assert TIMESTAMP.match(line)

    evens = []
    odds = []
    for record in records:
        assert set(record) == {"Even", "Odd"}
        evens.extend(_parse_sequence(record["Even"]))
        odds.extend(_parse_sequence(record["Odd"]))
    evens.extend(_parse_sequence(seq_even.aggregate_and_reset()))
    odds.extend(_parse_sequence(seq_odd.aggregate_and_reset()))

    assert all(v % 2 == 0 for v in evens)
    assert all(v % 2 == 1 for v in odds)

    values = evens + odds
    assert len(values) == len(set(values))
    for start in (0, 1000, 2000, 3000):
        block = sorted(v for v in values if start < v < start + 1000)
        assert block
        assert block == list(range(start + 1, start + 1 + len(block)))


def test_run_cpu_http_writes_values_in_range(tmp_path):
    path = tmp_path / "cpu.log"
    cpu1, cpu2, rps = run_cpu_http(path, 1.2)

    assert [m.name for m in get_metrics()] == ["CPU1", "CPU2", "HTTP requests RPS"]

    records, lines = _parse_lines(path)
    assert len(lines) >= 2
    for line in lines:
        assert TIMESTAMP.match(line)

    total_requests = 0
    for record in records:
        assert set(record) == {"CPU1", "CPU2", "HTTP requests RPS"}
        assert 0.0 <= float(record["CPU1"]) <= 2.0
        assert 0.0 <= float(record["CPU2"]) <= 2.0
        count = int(record["HTTP requests RPS"])
        assert count >= 0
        total_requests += count

    assert 0.0 <= float(cpu1.aggregate_and_reset()) <= 2.0
    assert 0.0 <= float(cpu2.aggregate_and_reset()) <= 2.0
    total_requests += int(rps.aggregate_and_reset())
    assert total_requests >= 0


def test_first_snapshot_is_taken_before_workers_record(tmp_path):
    path = tmp_path / "custom.log"
    run_custom(path, 0.3)
    records, _ = _parse_lines(path)
    assert records
    combined = _parse_sequence(records[0]["Even"]) + _parse_sequence(
        records[0]["Odd"]
    )
    assert all(v % 1000 >= 1 for v in combined)


def test_main_runs_custom_workload(tmp_path):
    path = tmp_path / "main.log"
    assert main(["custom", "--output", str(path), "--duration", "0.3"]) == 0
    records, lines = _parse_lines(path)
    assert lines
    assert set(records[0]) == {"Even", "Odd"}


def test_main_runs_cpu_http_workload(tmp_path):
    path = tmp_path / "main.log"
    assert main(["cpu-http", "--output", str(path), "--duration", "0.2"]) == 0
    records, _ = _parse_lines(path)
    assert set(records[0]) == {"CPU1", "CPU2", "HTTP requests RPS"}


def test_main_appends_to_existing_file(tmp_path):
    path = tmp_path / "main.log"
    path.write_text("existing\n", encoding="utf-8")
    main(["custom", "--output", str(path), "--duration", "0.1"])
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "existing"
    assert len(lines) >= 2


def test_main_rejects_unknown_workload(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["unknown", "--output", str(tmp_path / "x.log")])
    assert info.value.code == 2


def test_main_rejects_negative_duration(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["custom", "--output", str(tmp_path / "x.log"), "--duration", "-1"])
    assert info.value.code == 2
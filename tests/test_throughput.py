from datetime import timedelta

import pytest

from aether_progress.throughput import (
    ThroughputCalculator,
    format_bytes,
    format_bytes_per_second,
    format_items_per_second,
)

MB = 1024 * 1024


def _calculator(start=0.0):
    """Return a calculator on a manual clock, and the one-element list holding the time."""
    moment = [start]
    return ThroughputCalculator(clock=lambda: moment[0]), moment


def test_throughput_display():
    calc, moment = _calculator(100.0)
    calc.update(0, MB)
    moment[0] += 2
    calc.update(0, 3 * MB)

    throughput = calc.average_bytes_per_second()
    assert throughput == 1.5 * MB
    assert format_bytes_per_second(throughput) == "1.50 MB/sec"


def test_instant_rates():
    calc, moment = _calculator()
    calc.update(0, MB)
    moment[0] = 2
    calc.update(10, 3 * MB)
    assert calc.instant_bytes_per_second() == float(MB)
    assert calc.instant_items_per_second() == 5.0


@pytest.mark.parametrize(
    "rate",
    [
        "instant_items_per_second",
        "instant_bytes_per_second",
        "average_items_per_second",
        "average_bytes_per_second",
    ],
)
def test_rates_zero_without_elapsed_time(rate):
    calc, _ = _calculator()
    calc.update(10, 100)
    assert getattr(calc, rate)() == 0.0


def test_average_items_per_second():
    calc, moment = _calculator()
    moment[0] = 4
    calc.update(20, 0)
    assert calc.average_items_per_second() == 5.0


def test_reset():
    calc, moment = _calculator()
    moment[0] = 1
    calc.update(5, 500)
    moment[0] = 4
    calc.reset()
    assert calc.elapsed_time() == timedelta(0)
    moment[0] = 5
    assert calc.average_items_per_second() == 0.0
    assert calc.instant_bytes_per_second() == 0.0


def test_elapsed_time():
    calc, moment = _calculator(10.0)
    moment[0] = 12.5
    assert calc.elapsed_time() == timedelta(seconds=2.5)


def test_summary():
    calc, moment = _calculator(10.0)
    moment[0] = 12.0
    calc.update(10, 4096)
    assert calc.summary() == "10 items (4.00 KB) in 2s | Avg: 5.00 items/sec, 2.00 KB/sec"


@pytest.mark.parametrize(
    "rate, expected",
    [
        (0.005, "< 0.01 items/sec"),
        (2.3, "2.30 items/sec"),
        (0.01, "0.01 items/sec"),
    ],
)
def test_format_items_per_second(rate, expected):
    assert format_items_per_second(rate) == expected


@pytest.mark.parametrize(
    "rate, expected",
    [
        (512, "512 B/sec"),
        (2048, "2.00 KB/sec"),
        (5.2 * MB, "5.20 MB/sec"),
        (3 * 1024 * MB, "3.00 GB/sec"),
        (0, "0 B/sec"),
    ],
)
def test_format_bytes_per_second(rate, expected):
    assert format_bytes_per_second(rate) == expected


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.00 KB"),
        (int(1.5 * MB), "1.50 MB"),
        (2 * 1024 * MB, "2.00 GB"),
        (1024 * 1024 * MB, "1.00 TB"),
    ],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected
"""Tests for DeltaClock."""

from cubeview.core import clock as clock_module
from cubeview.core.clock import DeltaClock


def test_delta_measures_elapsed(monkeypatch):
    times = iter([10.0, 10.016, 10.05])
    monkeypatch.setattr(clock_module.time, "perf_counter", lambda: next(times))
    clock = DeltaClock()
    assert abs(clock.get_delta() - 0.016) < 1e-9
    assert abs(clock.get_delta() - 0.034) < 1e-9


def test_delta_clamped(monkeypatch):
    times = iter([0.0, 5.0])
    monkeypatch.setattr(clock_module.time, "perf_counter", lambda: next(times))
    clock = DeltaClock(max_delta=0.1)
    assert clock.get_delta() == 0.1

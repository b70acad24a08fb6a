"""Unit tests for :mod:`orrery.clock`."""

import pytest

from orrery.clock import FrameClock


class FakeTime:
    """Time source returning scripted readings."""

    def __init__(self, *readings: float) -> None:
        self._readings = iter(readings)

    def __call__(self) -> float:
        return next(self._readings)


def test_first_tick_starts_clock() -> None:
    clock = FrameClock(FakeTime(10.0, 10.0))
    assert not clock.running

    elapsed, delta = clock.tick()
    assert clock.running
    assert elapsed == 0.0
    assert delta == 0.0


def test_ticks_report_elapsed_and_delta() -> None:
    clock = FrameClock(FakeTime(100.0, 100.0, 100.5, 101.25, 103.0))

    clock.tick()
    assert clock.tick() == pytest.approx((0.5, 0.5))
    assert clock.tick() == pytest.approx((1.25, 0.75))
    assert clock.tick() == pytest.approx((3.0, 1.75))


def test_elapsed_before_start() -> None:
    clock = FrameClock(FakeTime())
    assert clock.elapsed == 0.0


def test_restart() -> None:
    clock = FrameClock(FakeTime(0.0, 0.0, 5.0, 8.0, 9.0))
    clock.tick()
    clock.tick()

    clock.start()
    assert clock.tick() == pytest.approx((1.0, 1.0))


def test_default_time_source_is_monotonic() -> None:
    clock = FrameClock()
    clock.start()
    elapsed, delta = clock.tick()
    assert elapsed >= 0.0
    assert delta >= 0.0

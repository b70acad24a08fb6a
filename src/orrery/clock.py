"""Explicit animation clock."""

import time
from collections.abc import Callable


class FrameClock:
    """Clock that reports elapsed and per-frame time for an animation loop.

    The clock is an ordinary object handed to the host loop, and its readings are
    passed explicitly into :meth:`orrery.system.SolarSystem.step`, so tests can drive
    the scene with injected times.

    Parameters
    ----------
    time_fn
        Optional: monotonic time source in seconds. Defaults to
        :func:`time.perf_counter`.
    """

    def __init__(self, time_fn: Callable[[], float] = time.perf_counter) -> None:
        self._time_fn = time_fn
        self._start: float | None = None
        self._last: float | None = None

    @property
    def running(self) -> bool:
        return self._start is not None

    @property
    def elapsed(self) -> float:
        """Time since :meth:`start`, or zero if the clock has not started."""
        if self._start is None:
            return 0.0
        return self._time_fn() - self._start

    def start(self) -> None:
        """Start, or restart, the clock at the current time."""
        now = self._time_fn()
        self._start = now
        self._last = now

    def tick(self) -> tuple[float, float]:
        """Read the clock once per frame.

        Returns
        -------
        elapsed, delta
            Time since the clock started and time since the previous tick. The first
            tick starts the clock and reports zero for both.
        """
        if self._start is None:
            self.start()

        now = self._time_fn()
        delta = now - self._last
        self._last = now
        return now - self._start, delta

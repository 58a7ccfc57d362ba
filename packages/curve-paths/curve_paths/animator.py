"""Animator - timed progress driver with listener callbacks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from curve_paths.easing import Interpolator, linear

_Hook = Callable[[], None]


@dataclass(frozen=True)
class IntValues:
    """Integer property range; evaluation truncates toward zero."""

    start: int
    end: int

    def evaluate(self, fraction: float) -> int:
        return int(self.start + fraction * (self.end - self.start))


@dataclass(frozen=True)
class FloatValues:
    start: float
    end: float

    def evaluate(self, fraction: float) -> float:
        return self.start + fraction * (self.end - self.start)


class Animator:
    """Drives a 0->1 progress value over a fixed duration.

    Time is pushed in with advance(); nothing here reads a wall clock, so
    the caller's frame loop decides the pacing. on_tick receives the
    interpolated fraction. Cancelling fires on_cancel and then on_end, so
    on_end sees every way a cycle can stop.
    """

    def __init__(
        self,
        duration: float,
        interpolator: Interpolator = linear,
        repeat_count: int = 0,
        on_start: _Hook | None = None,
        on_tick: Callable[[float], None] | None = None,
        on_repeat: _Hook | None = None,
        on_cancel: _Hook | None = None,
        on_end: _Hook | None = None,
    ) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        if repeat_count < 0:
            raise ValueError("repeat_count must be non-negative")
        self._duration = duration
        self._interpolator = interpolator
        self._repeat_count = repeat_count
        self._on_start = on_start
        self._on_tick = on_tick
        self._on_repeat = on_repeat
        self._on_cancel = on_cancel
        self._on_end = on_end
        self._elapsed = 0.0
        self._repeated = 0
        self._started = False
        self._running = False

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def is_started(self) -> bool:
        return self._started

    def is_running(self) -> bool:
        return self._running

    def is_active(self) -> bool:
        return self._started or self._running

    def start(self) -> None:
        if self.is_active():
            self.cancel()
        self._elapsed = 0.0
        self._repeated = 0
        self._started = True
        self._running = True
        if self._on_start is not None:
            self._on_start()
        self._emit(0.0)

    def advance(self, dt: float) -> None:
        if not self._running:
            return
        self._elapsed += dt
        fraction = self._elapsed / self._duration

        while fraction >= 1.0 and self._repeated < self._repeat_count:
            self._repeated += 1
            self._elapsed -= self._duration
            fraction = self._elapsed / self._duration
            if self._on_repeat is not None:
                self._on_repeat()

        fraction = min(fraction, 1.0)
        self._emit(fraction)
        if fraction >= 1.0:
            self._finish()

    def cancel(self) -> None:
        if not self.is_active():
            return
        self._started = False
        self._running = False
        if self._on_cancel is not None:
            self._on_cancel()
        if self._on_end is not None:
            self._on_end()

    def end(self) -> None:
        """Jump to the final value and finish the cycle."""
        if not self.is_active():
            return
        self._elapsed = self._duration
        self._emit(1.0)
        self._finish()

    def _emit(self, fraction: float) -> None:
        if self._on_tick is not None:
            self._on_tick(self._interpolator(fraction))

    def _finish(self) -> None:
        self._started = False
        self._running = False
        if self._on_end is not None:
            self._on_end()

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock abstraction.

    Engine logic depends on this interface rather than calling real time directly,
    so tests can drive deferred notifications with a fake clock.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Production clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


class OneShotTimer:
    """Polled, cancellable one-shot deferred call.

    Every schedule() or cancel() bumps a generation counter; a callback only
    fires if its generation is still current when poll() finds it due.
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._generation = 0
        self._due_at_s: float | None = None
        self._callback: Callable[[], None] | None = None
        self._armed_generation: int | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> bool:
        return self._callback is not None and self._armed_generation == self._generation

    def schedule(self, delay_s: float, callback: Callable[[], None]) -> int:
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        self._generation += 1
        self._due_at_s = self._clock.now() + float(delay_s)
        self._callback = callback
        self._armed_generation = self._generation
        return self._generation

    def cancel(self) -> None:
        self._generation += 1
        self._clear()

    def poll(self) -> bool:
        """Fire the callback if due. Returns True if it fired."""

        if not self.pending:
            return False
        assert self._due_at_s is not None
        if self._clock.now() < self._due_at_s:
            return False
        callback = self._callback
        self._clear()
        assert callback is not None
        callback()
        return True

    def _clear(self) -> None:
        self._due_at_s = None
        self._callback = None
        self._armed_generation = None

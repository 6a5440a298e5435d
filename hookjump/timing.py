"""Deterministic interval timers driven by explicit elapsed time."""

from __future__ import annotations

from typing import Callable, Optional


class Timer:
    """A repeating timer that fires its callback as simulated time passes.

    The timer does nothing until started. Restarting it resets its phase.
    A callback may stop or restart the timer while it fires.
    """

    def __init__(self, callback: Optional[Callable[[], None]] = None) -> None:
        self.callback = callback
        self.interval_ms: Optional[float] = None
        self.active = False
        self._elapsed = 0.0

    @property
    def remaining_ms(self) -> Optional[float]:
        """Time left until the next timeout, or None when stopped."""
        if not self.active or self.interval_ms is None:
            return None
        return self.interval_ms - self._elapsed

    def start(self, interval_ms: float) -> None:
        """Start, or restart, the timer with the given interval."""
        if interval_ms < 0:
            raise ValueError(f"interval must not be negative: {interval_ms}")
        self.interval_ms = interval_ms
        self.active = True
        self._elapsed = 0.0

    def stop(self) -> None:
        """Stop the timer; a later start begins a fresh interval."""
        self.active = False
        self._elapsed = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Let time pass, firing the callback for each timeout; return the count."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must not be negative: {elapsed_ms}")
        fired = 0
        while self.active and self.interval_ms is not None:
            interval = self.interval_ms
            remaining = interval - self._elapsed
            if elapsed_ms < remaining:
                self._elapsed += elapsed_ms
                break
            elapsed_ms -= remaining
            self._elapsed = 0.0
            fired += 1
            if self.callback is not None:
                self.callback()
            if interval == 0 and self.interval_ms == 0:
                break
        return fired
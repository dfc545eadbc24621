"""Time-based throttle gate.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["IntervalGate"]


class IntervalGate:
    """Opens at most once per interval of host time.

    The first check always opens. Skipping a check only delays work.

    Example:
        >>> gate = IntervalGate(0.1)
        >>> gate.ready(10.0), gate.ready(10.05), gate.ready(10.1)
        (True, False, True)
    """

    __slots__ = ("_interval", "_last")

    def __init__(self, interval: float) -> None:
        if interval < 0:
            msg = f"interval must be non-negative, got {interval}"
            raise ValueError(msg)
        self._interval = interval
        self._last: float | None = None

    @property
    def interval(self) -> float:
        """Minimum seconds between openings."""
        return self._interval

    def ready(self, now: float) -> bool:
        """Check the gate at host time ``now``; opening it restarts the interval."""
        if self._last is not None and now - self._last < self._interval:
            return False
        self._last = now
        return True

    def reset(self) -> None:
        """Make the next check open."""
        self._last = None

    def __repr__(self) -> str:
        return f"IntervalGate(interval={self._interval}, last={self._last})"

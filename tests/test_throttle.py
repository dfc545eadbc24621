"""Tests for IntervalGate.

Python 3.13+.
"""

import pytest

from uilocalizer.runtime.throttle import IntervalGate


class TestIntervalGate:
    """Test IntervalGate timing."""

    def test_first_check_opens(self) -> None:
        """The gate starts open."""
        assert IntervalGate(2.0).ready(0.0)

    def test_closed_within_interval(self) -> None:
        """Checks inside the interval stay closed and do not restart it."""
        gate = IntervalGate(0.1)
        assert gate.ready(1.0)
        assert not gate.ready(1.05)
        assert not gate.ready(1.09)
        assert gate.ready(1.1)

    def test_reset_reopens(self) -> None:
        """reset() makes the next check open."""
        gate = IntervalGate(2.0)
        gate.ready(5.0)
        gate.reset()
        assert gate.ready(5.5)

    def test_negative_interval_rejected(self) -> None:
        """Negative intervals raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            IntervalGate(-1.0)

    def test_zero_interval_always_open(self) -> None:
        """Zero interval opens on every check."""
        gate = IntervalGate(0.0)
        assert gate.ready(1.0) and gate.ready(1.0)

"""Unit tests for kernel time utilities."""

from __future__ import annotations

import time

import pytest

from tripwire.kernel.time import Clock, FrozenClock, SystemClock, TimeUnit


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_monotonic_returns_float(self) -> None:
        assert isinstance(SystemClock().monotonic(), float)

    def test_monotonic_never_goes_backwards(self) -> None:
        clk = SystemClock()
        first = clk.monotonic()
        second = clk.monotonic()
        assert second >= first

    def test_tracks_time_monotonic(self) -> None:
        assert abs(SystemClock().monotonic() - time.monotonic()) < 1.0


# ---------------------------------------------------------------------------
# FrozenClock
# ---------------------------------------------------------------------------


class TestFrozenClock:
    def test_starts_at_zero_by_default(self) -> None:
        assert FrozenClock().monotonic() == 0.0

    def test_stays_put_until_advanced(self) -> None:
        clk = FrozenClock(42.0)
        assert clk.monotonic() == 42.0
        assert clk.monotonic() == 42.0

    def test_advance_by_seconds(self) -> None:
        clk = FrozenClock()
        clk.advance(seconds=30)
        assert clk.monotonic() == 30.0

    def test_advance_by_mixed_units(self) -> None:
        clk = FrozenClock()
        clk.advance(minutes=1, milliseconds=500)
        assert clk.monotonic() == pytest.approx(60.5)

    def test_satisfies_clock_protocol(self) -> None:
        clk: Clock = FrozenClock()
        assert hasattr(clk, "monotonic")


# ---------------------------------------------------------------------------
# TimeUnit
# ---------------------------------------------------------------------------


class TestTimeUnit:
    @pytest.mark.parametrize(
        ("unit", "seconds"),
        [
            (TimeUnit.NANOSECONDS, 1e-9),
            (TimeUnit.MICROSECONDS, 1e-6),
            (TimeUnit.MILLISECONDS, 1e-3),
            (TimeUnit.SECONDS, 1.0),
            (TimeUnit.MINUTES, 60.0),
            (TimeUnit.HOURS, 3600.0),
            (TimeUnit.DAYS, 86400.0),
        ],
    )
    def test_seconds_per_unit(self, unit: TimeUnit, seconds: float) -> None:
        assert unit.seconds == seconds

    def test_to_seconds(self) -> None:
        assert TimeUnit.MINUTES.to_seconds(2.5) == 150.0

    def test_parse_is_case_insensitive(self) -> None:
        assert TimeUnit.parse("milliseconds") is TimeUnit.MILLISECONDS
        assert TimeUnit.parse(" Hours ") is TimeUnit.HOURS

    def test_parse_passes_members_through(self) -> None:
        assert TimeUnit.parse(TimeUnit.DAYS) is TimeUnit.DAYS

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            TimeUnit.parse("fortnights")

    def test_is_str_enum(self) -> None:
        assert TimeUnit.SECONDS == "SECONDS"

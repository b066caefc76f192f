"""Resilience – rate tolerance (ToleranceConfig, ToleranceWindow)."""
from __future__ import annotations

import dataclasses
import threading

from tripwire.kernel.time import TimeUnit
from tripwire.observability.logging import get_logger
from tripwire.resilience.circuit_breaker.errors import InvalidToleranceError
from tripwire.resilience.circuit_breaker.state import WindowState

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ToleranceConfig:
    """How many eligible failures to absorb per window.

    *frequency* – eligible failures tolerated per window; ``0`` trips on
    the first one.
    *duration* – window length, expressed in *unit*.
    """

    frequency: int = 0
    duration: float = 0
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self) -> None:
        if isinstance(self.frequency, bool) or not isinstance(self.frequency, int):
            raise InvalidToleranceError("frequency", self.frequency, "must be an integer")
        if self.frequency < 0:
            raise InvalidToleranceError("frequency", self.frequency)
        if isinstance(self.duration, bool) or not isinstance(self.duration, (int, float)):
            raise InvalidToleranceError("duration", self.duration, "must be a number")
        # NaN compares false both ways and would pin the window open forever.
        if not self.duration >= 0:
            raise InvalidToleranceError("duration", self.duration)
        try:
            unit = TimeUnit.parse(self.unit)
        except ValueError as exc:
            raise InvalidToleranceError("unit", self.unit, "is not a known time unit") from exc
        object.__setattr__(self, "unit", unit)

    @property
    def window_seconds(self) -> float:
        return self.unit.to_seconds(self.duration)


class ToleranceWindow:
    """Fixed tolerance window anchored at the first failure after a reset.

    A trip does not restart the window: failures that keep arriving inside
    the same window keep tripping until *duration* has elapsed since its
    start. A failure arriving exactly *duration* after the start opens a
    new window.
    """

    def __init__(self, tolerance: ToleranceConfig | None = None) -> None:
        self._tolerance = tolerance or ToleranceConfig()
        self._state = WindowState()
        self._lock = threading.Lock()

    @property
    def tolerance(self) -> ToleranceConfig:
        return self._tolerance

    def reconfigure(self, tolerance: ToleranceConfig) -> None:
        """Swap the tolerance; the current window keeps its count."""
        with self._lock:
            self._tolerance = tolerance

    def record(self, now: float) -> bool:
        """Count one eligible failure at *now*; return ``True`` if it trips."""
        with self._lock:
            tolerance = self._tolerance
            if tolerance.frequency == 0:
                return True

            state = self._state
            if state.window_start is None or now - state.window_start >= tolerance.window_seconds:
                state.restart(now)
                logger.debug("tolerance_window.reset", window_start=now)
                return False

            state.count_in_window += 1
            return state.count_in_window > tolerance.frequency


__all__ = ["ToleranceConfig", "ToleranceWindow"]

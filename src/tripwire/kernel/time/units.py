"""Kernel time – TimeUnit enum."""
from __future__ import annotations

from enum import Enum


class TimeUnit(str, Enum):
    """Granularity of a configured duration."""

    NANOSECONDS = "NANOSECONDS"
    MICROSECONDS = "MICROSECONDS"
    MILLISECONDS = "MILLISECONDS"
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"

    @property
    def seconds(self) -> float:
        """Length of one unit, in seconds."""
        return _SECONDS_PER_UNIT[self]

    def to_seconds(self, amount: float) -> float:
        return amount * self.seconds

    @classmethod
    def parse(cls, value: "TimeUnit | str") -> "TimeUnit":
        """Accept a member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


_SECONDS_PER_UNIT: dict[TimeUnit, float] = {
    TimeUnit.NANOSECONDS: 1e-9,
    TimeUnit.MICROSECONDS: 1e-6,
    TimeUnit.MILLISECONDS: 1e-3,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
}

__all__ = ["TimeUnit"]

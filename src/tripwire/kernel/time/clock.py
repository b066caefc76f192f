"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract monotonic clock for deterministic testing."""

    def monotonic(self) -> float: ...


class SystemClock:
    """Production clock that delegates to ``time.monotonic()``."""

    def monotonic(self) -> float:
        return time.monotonic()


class FrozenClock:
    """Test clock pinned to a fixed reading until explicitly advanced."""

    def __init__(self, start: float = 0.0) -> None:
        self._reading = start

    def monotonic(self) -> float:
        return self._reading

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen reading by the given ``timedelta`` kwargs."""
        self._reading += timedelta(**kwargs).total_seconds()


__all__ = ["Clock", "FrozenClock", "SystemClock"]

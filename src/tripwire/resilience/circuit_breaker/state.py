"""Resilience – tolerance WindowState."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class WindowState:
    """Mutable fixed-window bookkeeping, owned by one ToleranceWindow."""

    window_start: float | None = None
    count_in_window: int = 0

    def restart(self, now: float) -> None:
        self.window_start = now
        self.count_in_window = 1


__all__ = ["WindowState"]

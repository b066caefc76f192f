"""conftest.py for benchmarks.

Provides pre-built interpreters so each benchmark measures only the
``should_trip`` hot path, not construction or validation.
"""

from __future__ import annotations

import pytest

from tripwire.kernel.time import FrozenClock
from tripwire.resilience.circuit_breaker import (
    DefaultFailureInterpreter,
    create_failure_interpreter,
)


@pytest.fixture()
def default_interpreter() -> DefaultFailureInterpreter:
    """Root trip set, zero tolerance; every failure trips."""
    return create_failure_interpreter(clock=FrozenClock())


@pytest.fixture()
def tolerant_interpreter() -> DefaultFailureInterpreter:
    """Large tolerance window, so every call takes the counting branch."""
    return create_failure_interpreter(
        ignore=[KeyError, FileNotFoundError],
        trip=[Exception],
        frequency=10_000_000,
        duration=3600,
        clock=FrozenClock(),
    )

"""Resilience – FailureInterpreter protocol and DefaultFailureInterpreter."""
from __future__ import annotations

import threading
from typing import Any, Iterable, Protocol, runtime_checkable

from tripwire.kernel.categories import FailureCategory, default_registry
from tripwire.kernel.time import Clock, SystemClock, TimeUnit
from tripwire.observability.logging import get_logger
from tripwire.resilience.circuit_breaker.classifier import TypeClassifier
from tripwire.resilience.circuit_breaker.errors import InvalidConfigurationError
from tripwire.resilience.circuit_breaker.policy import CategoryLike, FailureInterpreterPolicy
from tripwire.resilience.circuit_breaker.tolerance import ToleranceWindow


@runtime_checkable
class FailureInterpreter(Protocol):
    """Port: decides whether an observed failure counts against a breaker."""

    def should_trip(self, failure: Any) -> bool: ...


class DefaultFailureInterpreter:
    """Classifies failures by kind, then applies a rate tolerance.

    A failure whose category is-a member of ``ignore`` never trips and
    consumes no tolerance. Otherwise, if it is-a member of ``trip``, it is
    counted by a :class:`ToleranceWindow`, which decides the verdict.

    Safe to share across threads: window bookkeeping is locked, and
    reconfiguration publishes a new immutable policy in one assignment.
    """

    def __init__(
        self,
        policy: FailureInterpreterPolicy | None = None,
        *,
        clock: Clock | None = None,
        name: str = "default",
    ) -> None:
        self.name = name
        self._policy = policy or FailureInterpreterPolicy()
        self._classifier = TypeClassifier(self._policy.ignore, self._policy.trip)
        self._window = ToleranceWindow(self._policy.tolerance)
        self._clock: Clock = clock or SystemClock()
        self._config_lock = threading.Lock()
        self._log = get_logger(__name__, interpreter=name)
        self._log.info("failure_interpreter.created", **self._policy.to_dict())

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def should_trip(self, failure: Any) -> bool:
        category = default_registry.category_of(failure)
        classifier = self._classifier
        if classifier.is_ignored(category):
            return False
        if not classifier.is_trip_eligible(category):
            return False
        tripped = self._window.record(self._clock.monotonic())
        if tripped:
            self._log.info("failure_interpreter.tripped", category=category.name)
        return tripped

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def policy(self) -> FailureInterpreterPolicy:
        return self._policy

    @property
    def ignore(self) -> frozenset[FailureCategory]:
        return self._policy.ignore

    @property
    def trip(self) -> frozenset[FailureCategory]:
        return self._policy.trip

    @property
    def frequency(self) -> int:
        return self._policy.frequency

    @property
    def duration(self) -> float:
        return self._policy.duration

    @property
    def unit(self) -> TimeUnit:
        return self._policy.unit

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_ignore(self, categories: Iterable[CategoryLike]) -> None:
        self._reconfigure(ignore=categories)

    def set_trip(self, categories: Iterable[CategoryLike]) -> None:
        self._reconfigure(trip=categories)

    def set_frequency(self, frequency: int) -> None:
        self._reconfigure(frequency=frequency)

    def set_duration(self, duration: float, unit: TimeUnit | str | None = None) -> None:
        if unit is None:
            self._reconfigure(duration=duration)
        else:
            self._reconfigure(duration=duration, unit=unit)

    def set_unit(self, unit: TimeUnit | str) -> None:
        self._reconfigure(unit=unit)

    def _reconfigure(self, **changes: Any) -> None:
        with self._config_lock:
            try:
                policy = self._policy.replace(**changes)
            except InvalidConfigurationError as exc:
                self._log.warning(
                    "failure_interpreter.rejected_configuration",
                    fields=sorted(changes),
                    **exc.log_fields(),
                )
                raise
            if policy.ignore != self._policy.ignore or policy.trip != self._policy.trip:
                self._classifier = TypeClassifier(policy.ignore, policy.trip)
            if policy.tolerance != self._policy.tolerance:
                self._window.reconfigure(policy.tolerance)
            self._policy = policy
            self._log.info("failure_interpreter.reconfigured", **policy.to_dict())

    def __repr__(self) -> str:
        return f"DefaultFailureInterpreter(name={self.name!r}, policy={self._policy.to_dict()!r})"


def create_failure_interpreter(
    ignore: Iterable[CategoryLike] = (),
    trip: Iterable[CategoryLike] | None = None,
    frequency: int = 0,
    duration: float = 0,
    unit: TimeUnit | str = TimeUnit.SECONDS,
    *,
    clock: Clock | None = None,
    name: str = "default",
) -> DefaultFailureInterpreter:
    """Validate a configuration and build an interpreter from it.

    Every construction variant (ignore only, ignore + tolerance,
    ignore + trip, ignore + trip + tolerance) is a subset of these
    keyword arguments; omitted ones keep their defaults.

    Raises
    ------
    InvalidConfigurationError
        When the ignore/trip sets conflict or a tolerance value is invalid.
    """
    policy = FailureInterpreterPolicy.create(
        ignore=ignore,
        trip=trip,
        frequency=frequency,
        duration=duration,
        unit=unit,
    )
    return DefaultFailureInterpreter(policy, clock=clock, name=name)


__all__ = ["DefaultFailureInterpreter", "FailureInterpreter", "create_failure_interpreter"]

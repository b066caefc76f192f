"""Resilience – FailureInterpreterPolicy."""
from __future__ import annotations

import copy
import dataclasses
from typing import Any, Iterable, Union

from tripwire.kernel.categories import ANY_FAILURE, FailureCategory, default_registry
from tripwire.kernel.time import TimeUnit
from tripwire.resilience.circuit_breaker.errors import InvalidConfigurationError
from tripwire.resilience.circuit_breaker.tolerance import ToleranceConfig
from tripwire.resilience.circuit_breaker.validator import validate_categories

CategoryLike = Union[FailureCategory, type[BaseException]]

_TOLERANCE_FIELDS = frozenset({"frequency", "duration", "unit"})


@dataclasses.dataclass(frozen=True)
class FailureInterpreterPolicy:
    """Configuration for a failure interpreter.

    *ignore* and *trip* accept any iterable of categories or exception
    classes; they are normalised to ``frozenset[FailureCategory]``.
    Construction validates the whole policy, so a policy instance is
    always consistent.

    Raises
    ------
    InvalidConfigurationError
        When *ignore* or *trip* holds something other than a category or
        an exception class.
    CategoryConflictError
        When a trip category is shadowed by an ignore category.
    InvalidToleranceError
        When frequency or duration is negative, or the unit is unknown.
    """

    ignore: frozenset[FailureCategory] = frozenset()
    trip: frozenset[FailureCategory] = frozenset({ANY_FAILURE})
    frequency: int = 0
    duration: float = 0
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "ignore", _normalise("ignore", self.ignore))
        object.__setattr__(self, "trip", _normalise("trip", self.trip))
        tolerance = ToleranceConfig(self.frequency, self.duration, self.unit)
        object.__setattr__(self, "unit", tolerance.unit)
        validate_categories(self.ignore, self.trip)

    @classmethod
    def create(
        cls,
        ignore: Iterable[CategoryLike] = (),
        trip: Iterable[CategoryLike] | None = None,
        frequency: int = 0,
        duration: float = 0,
        unit: TimeUnit | str = TimeUnit.SECONDS,
    ) -> FailureInterpreterPolicy:
        """Build a policy; ``trip=None`` means the root category."""
        return cls(
            ignore=ignore,  # type: ignore[arg-type]
            trip=frozenset({ANY_FAILURE}) if trip is None else trip,  # type: ignore[arg-type]
            frequency=frequency,
            duration=duration,
            unit=unit,  # type: ignore[arg-type]
        )

    @property
    def tolerance(self) -> ToleranceConfig:
        return ToleranceConfig(self.frequency, self.duration, self.unit)

    def replace(self, **changes: Any) -> FailureInterpreterPolicy:
        """Return a new, re-validated policy with *changes* applied.

        Tolerance-only changes re-check the tolerance but not the category
        sets, which are unchanged.
        """
        if changes.keys() <= _TOLERANCE_FIELDS:
            tolerance = ToleranceConfig(
                changes.get("frequency", self.frequency),
                changes.get("duration", self.duration),
                changes.get("unit", self.unit),
            )
            policy = copy.copy(self)
            object.__setattr__(policy, "frequency", tolerance.frequency)
            object.__setattr__(policy, "duration", tolerance.duration)
            object.__setattr__(policy, "unit", tolerance.unit)
            return policy
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / diagnostics)."""
        return {
            "ignore": sorted(c.name for c in self.ignore),
            "trip": sorted(c.name for c in self.trip),
            "frequency": self.frequency,
            "duration": self.duration,
            "unit": self.unit.value,
        }


def _normalise(setting: str, values: Iterable[CategoryLike]) -> frozenset[FailureCategory]:
    try:
        return default_registry.as_categories(values)
    except TypeError as exc:
        raise InvalidConfigurationError(
            f"{setting} must contain failure categories or exception classes, got {values!r}",
            detail={"setting": setting, "value": repr(values)},
            cause=exc,
        ) from exc


__all__ = ["CategoryLike", "FailureInterpreterPolicy"]

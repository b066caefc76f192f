"""Resilience – failure-interpreter configuration errors."""
from __future__ import annotations

from typing import Any

from tripwire.config.validation import ConfigError
from tripwire.kernel.categories import FailureCategory


class InvalidConfigurationError(ConfigError):
    """A failure interpreter was given a configuration it cannot honour.

    Raised by constructors and mutators; the interpreter's previous
    configuration stays in force.
    """

    default_code = "invalid_failure_interpreter_configuration"


class CategoryConflictError(InvalidConfigurationError):
    """A trip category is shadowed by an ignore category.

    Attributes
    ----------
    conflicting_trip:
        The trip category that could never trip.
    conflicting_ignore:
        The ignore category it equals or descends from.
    """

    default_code = "category_conflict"

    def __init__(
        self,
        conflicting_trip: FailureCategory,
        conflicting_ignore: FailureCategory,
        **kwargs: Any,
    ) -> None:
        relation = "is" if conflicting_trip is conflicting_ignore else "is a subtype of"
        super().__init__(
            f"Trip category {conflicting_trip.name!r} {relation} ignored "
            f"category {conflicting_ignore.name!r} and can never trip",
            detail={"trip": conflicting_trip.name, "ignore": conflicting_ignore.name},
            **kwargs,
        )
        self.conflicting_trip = conflicting_trip
        self.conflicting_ignore = conflicting_ignore


class InvalidToleranceError(InvalidConfigurationError):
    """A tolerance setting (frequency, duration or unit) is out of range."""

    default_code = "invalid_tolerance"

    def __init__(
        self,
        setting: str,
        value: object,
        reason: str = "must be non-negative",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Tolerance {setting} {reason}, got {value!r}",
            detail={"setting": setting, "value": value},
            **kwargs,
        )
        self.setting = setting
        self.value = value


__all__ = ["CategoryConflictError", "InvalidConfigurationError", "InvalidToleranceError"]

"""Resilience – FailureInterpreterSettings (12-factor binding)."""
from __future__ import annotations

import builtins
import dataclasses
import importlib
from typing import ClassVar

from tripwire.config.settings import Settings
from tripwire.config.validation import InvalidSettingValueError
from tripwire.kernel.time import Clock, TimeUnit
from tripwire.resilience.circuit_breaker.interpreter import DefaultFailureInterpreter
from tripwire.resilience.circuit_breaker.policy import FailureInterpreterPolicy


@dataclasses.dataclass
class FailureInterpreterSettings(Settings):
    """Failure-interpreter settings, read from ``FAILURE_INTERPRETER_*``.

    *ignore* and *trip* hold exception class paths such as
    ``"builtins.OSError"`` or ``"requests.exceptions.Timeout"``; a bare
    name resolves against :mod:`builtins`. An empty *trip* list keeps the
    default (every failure is eligible).

    Example environment::

        FAILURE_INTERPRETER_IGNORE=ValueError,KeyError
        FAILURE_INTERPRETER_FREQUENCY=5
        FAILURE_INTERPRETER_DURATION=30
        FAILURE_INTERPRETER_UNIT=SECONDS
    """

    _prefix: ClassVar[str] = "FAILURE_INTERPRETER"

    ignore: list[str] = dataclasses.field(default_factory=list)
    trip: list[str] = dataclasses.field(default_factory=list)
    frequency: int = 0
    duration: float = 0.0
    unit: str = TimeUnit.SECONDS.value

    def _validate(self) -> None:
        if self.frequency < 0:
            raise InvalidSettingValueError("frequency", self.frequency, "must be non-negative")
        if not self.duration >= 0:
            raise InvalidSettingValueError("duration", self.duration, "must be non-negative")
        try:
            TimeUnit.parse(self.unit)
        except ValueError as exc:
            raise InvalidSettingValueError(
                "unit", self.unit, f"expected one of {[u.value for u in TimeUnit]}"
            ) from exc

    def to_policy(self) -> FailureInterpreterPolicy:
        """Resolve class paths and build a validated policy.

        Raises
        ------
        InvalidSettingValueError
            When a class path cannot be imported or is not an exception.
        InvalidConfigurationError
            When the resolved ignore/trip sets conflict.
        """
        ignore = [_resolve_exception("ignore", path) for path in self.ignore]
        trip = [_resolve_exception("trip", path) for path in self.trip] or None
        return FailureInterpreterPolicy.create(
            ignore=ignore,
            trip=trip,
            frequency=self.frequency,
            duration=self.duration,
            unit=self.unit,
        )

    def build_interpreter(
        self, clock: Clock | None = None, name: str = "default"
    ) -> DefaultFailureInterpreter:
        return DefaultFailureInterpreter(self.to_policy(), clock=clock, name=name)


def _resolve_exception(setting: str, path: str) -> type[BaseException]:
    module_name, _, attr = path.rpartition(".")
    try:
        if module_name:
            target = getattr(importlib.import_module(module_name), attr)
        else:
            target = getattr(builtins, attr)
    except (ImportError, AttributeError) as exc:
        raise InvalidSettingValueError(setting, path, "cannot be imported") from exc
    if not (isinstance(target, type) and issubclass(target, BaseException)):
        raise InvalidSettingValueError(setting, path, "is not an exception class")
    return target


__all__ = ["FailureInterpreterSettings"]

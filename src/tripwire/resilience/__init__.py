"""Resilience – failure interpretation for circuit breakers."""

from tripwire.resilience.circuit_breaker import (
    DefaultFailureInterpreter,
    FailureInterpreter,
    FailureInterpreterPolicy,
    InvalidConfigurationError,
    create_failure_interpreter,
)

__all__ = [
    "DefaultFailureInterpreter",
    "FailureInterpreter",
    "FailureInterpreterPolicy",
    "InvalidConfigurationError",
    "create_failure_interpreter",
]

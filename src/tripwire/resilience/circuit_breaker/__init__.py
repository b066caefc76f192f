"""Resilience – failure interpretation for circuit breakers."""
from tripwire.resilience.circuit_breaker.classifier import TypeClassifier
from tripwire.resilience.circuit_breaker.errors import (
    CategoryConflictError,
    InvalidConfigurationError,
    InvalidToleranceError,
)
from tripwire.resilience.circuit_breaker.interpreter import (
    DefaultFailureInterpreter,
    FailureInterpreter,
    create_failure_interpreter,
)
from tripwire.resilience.circuit_breaker.policy import FailureInterpreterPolicy
from tripwire.resilience.circuit_breaker.settings import FailureInterpreterSettings
from tripwire.resilience.circuit_breaker.state import WindowState
from tripwire.resilience.circuit_breaker.tolerance import ToleranceConfig, ToleranceWindow
from tripwire.resilience.circuit_breaker.validator import (
    ConfigurationValidator,
    validate_categories,
)

__all__ = [
    "CategoryConflictError",
    "ConfigurationValidator",
    "DefaultFailureInterpreter",
    "FailureInterpreter",
    "FailureInterpreterPolicy",
    "FailureInterpreterSettings",
    "InvalidConfigurationError",
    "InvalidToleranceError",
    "ToleranceConfig",
    "ToleranceWindow",
    "TypeClassifier",
    "WindowState",
    "create_failure_interpreter",
    "validate_categories",
]

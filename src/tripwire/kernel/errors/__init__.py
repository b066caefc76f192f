"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError                 (application.py)
        └── ConfigError                  (tripwire.config.validation)
            ├── MissingRequiredSettingError
            ├── InvalidSettingValueError
            └── InvalidConfigurationError (tripwire.resilience.circuit_breaker)
                ├── CategoryConflictError
                └── InvalidToleranceError
"""

from tripwire.kernel.errors.application import ApplicationError
from tripwire.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]

"""
tripwire – failure interpretation for circuit breakers.

Import path convention::

    from tripwire.resilience.circuit_breaker import create_failure_interpreter
    from tripwire.kernel.categories import ANY_FAILURE, FailureCategory
    from tripwire.kernel.time import FrozenClock, TimeUnit
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

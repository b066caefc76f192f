"""Kernel – framework-agnostic building blocks."""

from tripwire.kernel.categories import ANY_FAILURE, Failure, FailureCategory, category_of
from tripwire.kernel.errors import ApplicationError, BaseError
from tripwire.kernel.time import Clock, FrozenClock, SystemClock, TimeUnit

__all__ = [
    "ANY_FAILURE",
    "ApplicationError",
    "BaseError",
    "Clock",
    "Failure",
    "FailureCategory",
    "FrozenClock",
    "SystemClock",
    "TimeUnit",
    "category_of",
]

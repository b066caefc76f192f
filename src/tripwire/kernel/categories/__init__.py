"""Kernel categories – failure kinds and their is-a hierarchy."""
from tripwire.kernel.categories.category import ANY_FAILURE, FailureCategory
from tripwire.kernel.categories.registry import (
    ExceptionCategoryRegistry,
    Failure,
    category_of,
    default_registry,
)

__all__ = [
    "ANY_FAILURE",
    "ExceptionCategoryRegistry",
    "Failure",
    "FailureCategory",
    "category_of",
    "default_registry",
]

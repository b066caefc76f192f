"""Kernel categories – exception-class registry and failure classification."""
from __future__ import annotations

import dataclasses
import threading
from typing import Any, Iterable

from tripwire.kernel.categories.category import ANY_FAILURE, FailureCategory


@dataclasses.dataclass(frozen=True)
class Failure:
    """An observed failure, tagged only with its kind."""

    category: FailureCategory


class ExceptionCategoryRegistry:
    """Maps exception classes onto :class:`FailureCategory` nodes.

    The category of a class has the categories of its ``BaseException``
    bases as parents, so ``is_a`` agrees with ``issubclass``.
    ``BaseException`` itself maps to *root*. One category is cached per
    class, which keeps category identity stable across lookups.
    """

    def __init__(self, root: FailureCategory = ANY_FAILURE) -> None:
        self._root = root
        self._categories: dict[type[BaseException], FailureCategory] = {BaseException: root}
        self._lock = threading.RLock()

    @property
    def root(self) -> FailureCategory:
        return self._root

    def category_for(self, exc_type: type[BaseException]) -> FailureCategory:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(f"{exc_type!r} is not an exception class")
        cached = self._categories.get(exc_type)
        if cached is not None:
            return cached
        with self._lock:
            cached = self._categories.get(exc_type)
            if cached is not None:
                return cached
            parents = tuple(
                self.category_for(base)
                for base in exc_type.__bases__
                if issubclass(base, BaseException)
            )
            category = FailureCategory(_qualified_name(exc_type), parents=parents)
            self._categories[exc_type] = category
            return category

    def as_category(self, value: FailureCategory | type[BaseException]) -> FailureCategory:
        """Normalise a configured set member into a category."""
        if isinstance(value, FailureCategory):
            return value
        return self.category_for(value)

    def as_categories(
        self, values: Iterable[FailureCategory | type[BaseException]]
    ) -> frozenset[FailureCategory]:
        return frozenset(self.as_category(v) for v in values)

    def category_of(self, failure: Any) -> FailureCategory:
        """Classify *failure*; anything unrecognised is the root category."""
        if isinstance(failure, FailureCategory):
            return failure
        if isinstance(failure, Failure):
            return failure.category
        if isinstance(failure, BaseException):
            return self.category_for(type(failure))
        if isinstance(failure, type) and issubclass(failure, BaseException):
            return self.category_for(failure)
        return self._root


def _qualified_name(exc_type: type) -> str:
    if exc_type.__module__ == "builtins":
        return exc_type.__qualname__
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


default_registry = ExceptionCategoryRegistry()


def category_of(failure: Any) -> FailureCategory:
    """Shorthand for ``default_registry.category_of(failure)``."""
    return default_registry.category_of(failure)


__all__ = [
    "ExceptionCategoryRegistry",
    "Failure",
    "category_of",
    "default_registry",
]

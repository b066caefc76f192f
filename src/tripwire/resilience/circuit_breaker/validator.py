"""Resilience – ConfigurationValidator for ignore/trip category sets."""
from __future__ import annotations

from typing import Iterable

from tripwire.kernel.categories import FailureCategory
from tripwire.resilience.circuit_breaker.errors import CategoryConflictError


def _ordered(categories: Iterable[FailureCategory]) -> list[FailureCategory]:
    return sorted(categories, key=lambda c: c.name)


def validate_categories(
    ignore: Iterable[FailureCategory],
    trip: Iterable[FailureCategory],
) -> None:
    """Reject a *trip* category that equals or descends from an *ignore* one.

    Such a trip entry is unreachable. The reverse (ignoring a subtype of
    a trip category) is allowed.

    Raises
    ------
    CategoryConflictError
        For the first conflicting ``(trip, ignore)`` pair, in name order.
    """
    ignored = _ordered(ignore)
    for t in _ordered(trip):
        for i in ignored:
            if t is i or t.is_a(i):
                raise CategoryConflictError(t, i)


class ConfigurationValidator:
    """Object form of :func:`validate_categories`, for injection."""

    def validate(
        self,
        ignore: Iterable[FailureCategory],
        trip: Iterable[FailureCategory],
    ) -> None:
        validate_categories(ignore, trip)


__all__ = ["ConfigurationValidator", "validate_categories"]

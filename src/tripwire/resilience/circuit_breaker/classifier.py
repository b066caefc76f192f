"""Resilience – TypeClassifier."""
from __future__ import annotations

from tripwire.kernel.categories import FailureCategory


class TypeClassifier:
    """Structural eligibility of a failure category.

    Stateless beyond the two configured sets. An empty *trip* set makes
    nothing eligible.
    """

    __slots__ = ("_ignore", "_trip")

    def __init__(
        self,
        ignore: frozenset[FailureCategory],
        trip: frozenset[FailureCategory],
    ) -> None:
        self._ignore = ignore
        self._trip = trip

    def is_ignored(self, category: FailureCategory) -> bool:
        return any(category.is_a(i) for i in self._ignore)

    def is_trip_eligible(self, category: FailureCategory) -> bool:
        return any(category.is_a(t) for t in self._trip)


__all__ = ["TypeClassifier"]

"""Kernel categories – FailureCategory hierarchy node."""
from __future__ import annotations

import dataclasses
from typing import Iterator


@dataclasses.dataclass(frozen=True, eq=False)
class FailureCategory:
    """A node in the single-rooted hierarchy of failure kinds.

    Categories compare and hash by identity: two categories declared with
    the same *name* are still distinct. ``is_a`` is reflexive and
    transitive over ``parents``.
    """

    name: str
    parents: tuple[FailureCategory, ...] = ()
    _lineage: frozenset[FailureCategory] = dataclasses.field(
        init=False, repr=False, default=frozenset()
    )

    def __post_init__(self) -> None:
        lineage: set[FailureCategory] = {self}
        for parent in self.parents:
            lineage |= parent._lineage
        object.__setattr__(self, "_lineage", frozenset(lineage))

    def is_a(self, other: FailureCategory) -> bool:
        return other in self._lineage

    def child(self, name: str) -> FailureCategory:
        """Declare a new category directly below this one."""
        return FailureCategory(name, parents=(self,))

    def ancestors(self) -> Iterator[FailureCategory]:
        """Yield every strict ancestor, nearest first, each once."""
        seen: set[FailureCategory] = {self}
        frontier = list(self.parents)
        while frontier:
            node = frontier.pop(0)
            if node in seen:
                continue
            seen.add(node)
            yield node
            frontier.extend(node.parents)

    @property
    def is_root(self) -> bool:
        return not self.parents

    def __repr__(self) -> str:
        return f"FailureCategory({self.name!r})"


ANY_FAILURE = FailureCategory("any_failure")


__all__ = ["ANY_FAILURE", "FailureCategory"]

"""
AttributeList — a candidate column combination.

Column indices are kept ascending and deduplicated, so equality and
hashing are structural over the canonical tuple no matter in which order
the combination was built.  This is what lets the lattice search key its
"seen" set and its minimal-UCC index on attribute lists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dataprof.relation import Relation

__all__ = ["AttributeList"]


@dataclass(frozen=True, slots=True)
class AttributeList:
    """Immutable, sorted set of column indices.

    Build with :meth:`of` or :meth:`singleton`; the raw constructor expects
    an already canonical tuple.
    """

    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        canonical = tuple(sorted(set(self.indices)))
        if canonical != self.indices:
            object.__setattr__(self, "indices", canonical)

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def of(cls, *indices: int) -> AttributeList:
        return cls(tuple(indices))

    @classmethod
    def from_iterable(cls, indices: Iterable[int]) -> AttributeList:
        return cls(tuple(indices))

    @classmethod
    def singleton(cls, index: int) -> AttributeList:
        return cls((index,))

    # ── Lattice operations ───────────────────────────────────────────

    @property
    def prefix(self) -> tuple[int, ...]:
        """All indices but the last one (the level's join key)."""
        return self.indices[:-1]

    def union(self, other: AttributeList) -> AttributeList:
        return AttributeList(tuple(set(self.indices) | set(other.indices)))

    def same_prefix_as(self, other: AttributeList) -> bool:
        """True iff both lists have the same size n ≥ 1 and share their first n−1 indices.

        Two such lists join into a combination of size n+1 (unless they are
        equal).
        """
        if not self.indices or len(self.indices) != len(other.indices):
            return False
        return self.prefix == other.prefix

    def superset_of(self, other: AttributeList) -> bool:
        """Non-strict superset test."""
        return set(self.indices).issuperset(other.indices)

    # ── Presentation ─────────────────────────────────────────────────

    def names(self, relation: Relation) -> tuple[str, ...]:
        """Resolve the indices to *relation*'s attribute names."""
        return tuple(relation.attribute_names[i] for i in self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __lt__(self, other: AttributeList) -> bool:
        return (len(self.indices), self.indices) < (len(other.indices), other.indices)

    def __repr__(self) -> str:
        return f"AttributeList{list(self.indices)}"

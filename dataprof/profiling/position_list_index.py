"""
Position list index (PLI) — stripped partitions over row indices.

A PLI stores, for one column combination, the groups of rows that agree on
every column of the combination.  Only groups of two or more rows are kept:
a row that is alone in its group is already unique and stays implicit.
A PLI without clusters therefore marks a unique column combination.

Next to the clusters, each PLI holds the *inverted* index
``row -> cluster id`` (``NO_CLUSTER`` for implicit singletons).  It is what
makes :meth:`PositionListIndex.intersect` incremental: refining one PLI by
another touches only the rows that sit in non-trivial clusters of the
first, and consults the second only through array lookups.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Sequence
from itertools import chain

import numpy as np

from dataprof.profiling.attribute_list import AttributeList

__all__ = ["NO_CLUSTER", "PositionListIndex"]

NO_CLUSTER = -1


def _strip(groups: dict[Hashable, list[int]]) -> list[tuple[int, ...]]:
    return [tuple(rows) for rows in groups.values() if len(rows) > 1]


class PositionListIndex:
    """Stripped partition of a column combination.

    Use :meth:`from_column` (one raw column) or :meth:`intersect` (two
    existing PLIs) rather than the constructor.
    """

    __slots__ = ("_attributes", "_clusters", "_inverted")

    def __init__(
        self,
        attributes: AttributeList,
        clusters: Sequence[tuple[int, ...]],
        relation_length: int,
    ) -> None:
        self._attributes = attributes
        self._clusters: tuple[tuple[int, ...], ...] = tuple(clusters)
        inverted = np.full(relation_length, NO_CLUSTER, dtype=np.int64)
        for cluster_id, cluster in enumerate(self._clusters):
            inverted[list(cluster)] = cluster_id
        inverted.flags.writeable = False
        self._inverted = inverted

    # ── Construction ─────────────────────────────────────────────────

    @classmethod
    def from_column(
        cls,
        attributes: AttributeList,
        values: Sequence[str | None],
    ) -> PositionListIndex:
        """Group row indices by identical value; nulls form one group."""
        groups: dict[Hashable, list[int]] = defaultdict(list)
        for row, value in enumerate(values):
            groups[value].append(row)
        return cls(attributes, _strip(groups), len(values))

    @classmethod
    def from_columns(
        cls,
        attributes: AttributeList,
        columns: Sequence[Sequence[str | None]],
    ) -> PositionListIndex:
        """Group row indices by identical value tuples across *columns*.

        Scans raw values directly; the lattice search only uses
        :meth:`from_column` and :meth:`intersect`.
        """
        if not columns:
            raise ValueError("from_columns needs at least one column")
        groups: dict[Hashable, list[int]] = defaultdict(list)
        for row, key in enumerate(zip(*columns)):
            groups[key].append(row)
        return cls(attributes, _strip(groups), len(columns[0]))

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def attributes(self) -> AttributeList:
        return self._attributes

    @property
    def clusters(self) -> tuple[tuple[int, ...], ...]:
        return self._clusters

    @property
    def inverted(self) -> np.ndarray:
        """Read-only ``row -> cluster id`` array (``NO_CLUSTER`` if none)."""
        return self._inverted

    @property
    def relation_length(self) -> int:
        return len(self._inverted)

    def is_unique(self) -> bool:
        return not self._clusters

    def partition(self) -> frozenset[frozenset[int]]:
        """Cluster membership, independent of cluster and row order."""
        return frozenset(frozenset(cluster) for cluster in self._clusters)

    # ── Intersection ─────────────────────────────────────────────────

    def intersect(self, other: PositionListIndex) -> PositionListIndex:
        """Return the PLI of ``self.attributes ∪ other.attributes``.

        Every row of every cluster of ``self`` is looked up in ``other``'s
        inverted index.  Rows without a cluster in ``other`` are unique
        there and drop out; the remaining rows are grouped by
        ``(self cluster, other cluster)`` and groups of one are stripped.
        """
        if other.relation_length != self.relation_length:
            raise ValueError(
                f"Cannot intersect PLIs over {self.relation_length} and "
                f"{other.relation_length} rows"
            )
        attributes = self._attributes.union(other.attributes)
        if not self._clusters:
            return PositionListIndex(attributes, [], self.relation_length)

        sizes = [len(cluster) for cluster in self._clusters]
        rows = np.fromiter(chain.from_iterable(self._clusters), dtype=np.int64, count=sum(sizes))
        owners = np.repeat(np.arange(len(sizes), dtype=np.int64), sizes)
        partners = other.inverted[rows]

        clustered = partners != NO_CLUSTER
        rows, owners, partners = rows[clustered], owners[clustered], partners[clustered]
        if rows.size == 0:
            return PositionListIndex(attributes, [], self.relation_length)

        # lexsort is stable: rows keep their ascending order inside a group
        order = np.lexsort((partners, owners))
        rows, owners, partners = rows[order], owners[order], partners[order]
        breaks = np.flatnonzero((np.diff(owners) != 0) | (np.diff(partners) != 0)) + 1

        clusters = [
            tuple(group.tolist()) for group in np.split(rows, breaks) if group.size > 1
        ]
        return PositionListIndex(attributes, clusters, self.relation_length)

    def __repr__(self) -> str:
        return (
            f"PositionListIndex({self._attributes!r}, clusters={len(self._clusters)}, "
            f"rows={self.relation_length})"
        )

"""
Dependency graph — profiling results as a multi-relation graph over columns.

Architecture
------------
- Nodes  = ``ColumnRef`` (relation object, attribute name)
- Node attrs = ``unique`` (the column alone is a UCC)
- Edges  = directed, keyed by :class:`Dependency`
- Backend = ``networkx.MultiDiGraph``

``INCLUSION`` edges point from the dependent to the referenced column.
:meth:`DependencyGraph.build_pkfk` derives ``PKFK`` edges from them: an
inclusion into a column that is unique on its own is a foreign-key
candidate, pointing from the foreign key to the primary key.

Relations compare by identity, so two relations that share a name (say
``t.csv`` in two sibling directories) keep separate nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

import networkx as nx

from dataprof.profiling.ind_profiler import IND
from dataprof.profiling.ucc_profiler import UCC
from dataprof.relation import Relation

__all__ = ["ColumnRef", "Dependency", "DependencyGraph"]

logger = logging.getLogger(__name__)


class Dependency(Enum):
    """Edge types of the dependency graph."""

    INCLUSION = 0
    PKFK = 1


class ColumnRef(NamedTuple):
    relation: Relation
    attribute: str

    def __str__(self) -> str:
        return f"{self.relation.name}.{self.attribute}"

    def sort_key(self) -> tuple[str, str]:
        return self.relation.name, self.attribute


class DependencyGraph:
    """Columns of several relations linked by discovered dependencies."""

    def __init__(self) -> None:
        self._graph = nx.MultiDiGraph()

    # ── Population ───────────────────────────────────────────────────

    def _add_column(self, column: ColumnRef) -> None:
        if column not in self._graph:
            self._graph.add_node(column, unique=False)

    def add_uccs(self, uccs: Iterable[UCC]) -> None:
        """Register every column of every UCC; single-column UCCs mark their column unique."""
        for ucc in uccs:
            for name in ucc.names:
                self._add_column(ColumnRef(ucc.relation, name))
            if len(ucc.attributes) == 1:
                self._graph.nodes[ColumnRef(ucc.relation, ucc.names[0])]["unique"] = True

    def add_inds(self, inds: Iterable[IND]) -> None:
        for ind in inds:
            dep = ColumnRef(ind.dependent, ind.dependent_name)
            ref = ColumnRef(ind.referenced, ind.referenced_name)
            self._add_column(dep)
            self._add_column(ref)
            self._graph.add_edge(dep, ref, key=Dependency.INCLUSION)

    def build_pkfk(self) -> int:
        """Add a ``PKFK`` edge for every inclusion into a unique column.

        Returns the number of edges added; edges from an earlier call are
        not counted again.
        """
        pkfk = [
            (dep, ref)
            for dep, ref in self.edges(Dependency.INCLUSION)
            if self._graph.nodes[ref]["unique"]
            and not self._graph.has_edge(dep, ref, key=Dependency.PKFK)
        ]
        for dep, ref in pkfk:
            self._graph.add_edge(dep, ref, key=Dependency.PKFK)
        logger.info("Derived %d PK/FK candidates", len(pkfk))
        return len(pkfk)

    # ── Traversal ────────────────────────────────────────────────────

    @property
    def order(self) -> int:
        return self._graph.number_of_nodes()

    def edges(self, dependency: Dependency) -> Iterator[tuple[ColumnRef, ColumnRef]]:
        for src, tgt, key in self._graph.edges(keys=True):
            if key is dependency:
                yield src, tgt

    def neighbors(self, column: ColumnRef, dependency: Dependency) -> list[ColumnRef]:
        """Columns that *column* points to through *dependency* edges."""
        if column not in self._graph:
            return []
        return [
            tgt for tgt, edge_dict in self._graph[column].items() if dependency in edge_dict
        ]

    def primary_keys(self) -> list[ColumnRef]:
        """Unique columns referenced by at least one ``PKFK`` edge."""
        return sorted(
            {ref for _, ref in self.edges(Dependency.PKFK)}, key=ColumnRef.sort_key,
        )

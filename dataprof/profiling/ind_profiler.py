"""
IND profiler — unary inclusion dependencies across relations.

``R[a] ⊆ S[b]`` holds when every value of column ``a`` of ``R`` also
occurs in column ``b`` of ``S``.  Every ordered pair of distinct columns is
tested, within one relation and across relations.  Nulls count as a value
like any other, and an empty column is included in every column.

Only unary INDs are supported.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from dataprof.relation import Relation

__all__ = ["IND", "INDProfiler"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IND:
    """``dependent[dependent_index] ⊆ referenced[referenced_index]``."""

    dependent: Relation
    dependent_index: int
    referenced: Relation
    referenced_index: int

    @property
    def dependent_name(self) -> str:
        return self.dependent.attribute_names[self.dependent_index]

    @property
    def referenced_name(self) -> str:
        return self.referenced.attribute_names[self.referenced_index]

    def __str__(self) -> str:
        return (
            f"{self.dependent.name}.{self.dependent_name} ⊆ "
            f"{self.referenced.name}.{self.referenced_name}"
        )


class INDProfiler:
    """Discovers all non-trivial unary INDs among a list of relations."""

    def profile(
        self,
        relations: Sequence[Relation],
        discover_nary: bool = False,
    ) -> list[IND]:
        """Return every unary IND between columns of *relations*.

        Raises
        ------
        NotImplementedError
            If *discover_nary* is set; n-ary IND discovery is not supported.
        """
        if discover_nary:
            raise NotImplementedError("N-ary IND discovery is not supported")

        value_sets = {
            id(rel): [frozenset(col) for col in rel.columns] for rel in relations
        }

        inds: list[IND] = []
        for dep in relations:
            for ref in relations:
                dep_sets, ref_sets = value_sets[id(dep)], value_sets[id(ref)]
                for i, dep_values in enumerate(dep_sets):
                    for j, ref_values in enumerate(ref_sets):
                        if dep is ref and i == j:
                            continue
                        if dep_values <= ref_values:
                            inds.append(IND(dep, i, ref, j))

        logger.info("Found %d unary INDs across %d relations", len(inds), len(relations))
        return inds

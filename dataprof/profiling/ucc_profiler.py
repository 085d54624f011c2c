"""
UCC profiler — discovers all minimal unique column combinations.

Level-wise, breadth-first lattice search over position list indexes:

1. **Level 1** — one PLI per column.  Unique columns are minimal UCCs;
   the rest form the non-unique *frontier*.
2. **Level ℓ → ℓ+1** — frontier PLIs whose attribute lists share their
   first ℓ−1 indices are joined pairwise.  A combined attribute list is
   skipped if it was already produced at this level, or if it contains a
   known minimal UCC (it cannot be minimal, and its PLI intersection is
   never computed).  Otherwise the two PLIs are intersected: a unique
   result is a new minimal UCC, a non-unique one moves to the next frontier.
3. **Terminal** — the frontier is empty.

The minimal-UCC index consulted for pruning is an immutable snapshot taken
when a level starts.  UCCs found during the level are collected separately
and merged when it ends.  Candidates of one level all have the same size,
so none of them can be a proper superset of a sibling: the snapshot prunes
exactly what a live index would, and the intersections of one level are
free to run in parallel.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator, Sequence
from concurrent import futures
from dataclasses import dataclass, field
from itertools import combinations

from dataprof.config import ProfilingConfig
from dataprof.profiling.attribute_list import AttributeList
from dataprof.profiling.position_list_index import PositionListIndex
from dataprof.relation import Relation

__all__ = ["UCC", "LevelResult", "UCCProfiler"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UCC:
    """A minimal unique column combination of *relation*."""

    relation: Relation
    attributes: AttributeList

    @property
    def names(self) -> tuple[str, ...]:
        return self.attributes.names(self.relation)

    def __str__(self) -> str:
        return f"{self.relation.name}[{', '.join(self.names)}]"


@dataclass
class LevelResult:
    """What one lattice level contributed to the search."""

    level: int
    uccs: list[UCC] = field(default_factory=list)
    candidates: int = 0
    """Attribute combinations examined (columns at level 1, joined pairs after)."""

    pruned: int = 0
    """Candidates discarded as supersets of a known minimal UCC."""

    frontier_size: int = 0
    """Non-unique PLIs carried into the next level."""


def _join_candidates(
    frontier: Sequence[PositionListIndex],
    minimal_uccs: frozenset[AttributeList],
) -> tuple[list[tuple[PositionListIndex, PositionListIndex]], int]:
    """Return the PLI pairs to intersect for the next level and the number pruned.

    Only frontier members with the same prefix are joinable, so the frontier
    is bucketed by prefix instead of testing every pair.
    """
    by_prefix: dict[tuple[int, ...], list[PositionListIndex]] = defaultdict(list)
    for pli in frontier:
        by_prefix[pli.attributes.prefix].append(pli)

    seen: set[AttributeList] = set()
    pairs: list[tuple[PositionListIndex, PositionListIndex]] = []
    pruned = 0
    for bucket in by_prefix.values():
        for p1, p2 in combinations(bucket, 2):
            if not p1.attributes.same_prefix_as(p2.attributes):
                continue
            combined = p1.attributes.union(p2.attributes)
            if combined in seen:
                continue
            seen.add(combined)
            if any(combined.superset_of(ucc) for ucc in minimal_uccs):
                pruned += 1
                continue
            pairs.append((p1, p2))
    return pairs, pruned


def _intersect(pair: tuple[PositionListIndex, PositionListIndex]) -> PositionListIndex:
    p1, p2 = pair
    return p1.intersect(p2)


class UCCProfiler:
    """Finds every minimal, non-trivial UCC of a relation.

    Usage::

        profiler = UCCProfiler(ProfilingConfig(max_workers=4))
        for ucc in profiler.profile(relation):
            print(ucc.names)
    """

    def __init__(self, cfg: ProfilingConfig | None = None) -> None:
        self._cfg = cfg or ProfilingConfig()

    def profile(self, relation: Relation) -> list[UCC]:
        """Run the search to completion; UCCs come out level by level."""
        uccs: list[UCC] = []
        for result in self.iter_levels(relation):
            uccs.extend(result.uccs)
        logger.info(
            "Found %d minimal UCCs in %s (%d columns, %d rows)",
            len(uccs), relation.name, len(relation), relation.row_count,
        )
        return uccs

    def iter_levels(self, relation: Relation) -> Iterator[LevelResult]:
        """Yield one :class:`LevelResult` per lattice level.

        The search only advances when the next level is requested, so a
        caller with a deadline can simply stop iterating.
        """
        first = LevelResult(level=1, candidates=len(relation))
        frontier: list[PositionListIndex] = []
        for index, values in enumerate(relation.columns):
            pli = PositionListIndex.from_column(AttributeList.singleton(index), values)
            if pli.is_unique():
                first.uccs.append(UCC(relation, pli.attributes))
            else:
                frontier.append(pli)
        first.frontier_size = len(frontier)
        minimal_uccs = frozenset(ucc.attributes for ucc in first.uccs)
        self._log_level(first)
        yield first

        level = 1
        while frontier:
            level += 1
            result, frontier = self._next_level(relation, level, frontier, minimal_uccs)
            minimal_uccs = minimal_uccs | {ucc.attributes for ucc in result.uccs}
            self._log_level(result)
            yield result

    # ------------------------------------------------------------------
    # One level
    # ------------------------------------------------------------------

    def _next_level(
        self,
        relation: Relation,
        level: int,
        frontier: list[PositionListIndex],
        minimal_uccs: frozenset[AttributeList],
    ) -> tuple[LevelResult, list[PositionListIndex]]:
        pairs, pruned = _join_candidates(frontier, minimal_uccs)
        result = LevelResult(level=level, candidates=len(pairs) + pruned, pruned=pruned)

        next_frontier: list[PositionListIndex] = []
        for merged in self._intersect_all(pairs):
            if merged.is_unique():
                result.uccs.append(UCC(relation, merged.attributes))
            else:
                next_frontier.append(merged)
        result.frontier_size = len(next_frontier)
        return result, next_frontier

    def _intersect_all(
        self,
        pairs: list[tuple[PositionListIndex, PositionListIndex]],
    ) -> list[PositionListIndex]:
        """Intersect every pair, in order, on a thread pool when the level is large."""
        workers = self._cfg.max_workers
        if workers <= 1 or len(pairs) < self._cfg.parallel_min_candidates:
            return [_intersect(pair) for pair in pairs]

        chunksize = max(1, len(pairs) // (workers * 4))
        with futures.ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(_intersect, pairs, chunksize=chunksize))

    @staticmethod
    def _log_level(result: LevelResult) -> None:
        logger.debug(
            "Level %d: %d candidates, %d pruned, %d new UCCs, frontier %d",
            result.level,
            result.candidates,
            result.pruned,
            len(result.uccs),
            result.frontier_size,
        )

"""
Profiling package — dependency discovery over :class:`~dataprof.relation.Relation`.

Modules
-------
attribute_list
    Canonical column combinations (lattice nodes).
position_list_index
    Stripped partitions and their incremental intersection.
ucc_profiler
    Level-wise lattice search for minimal unique column combinations.
ind_profiler
    Unary inclusion dependencies across relations.
"""

from dataprof.profiling.attribute_list import AttributeList
from dataprof.profiling.ind_profiler import IND, INDProfiler
from dataprof.profiling.position_list_index import NO_CLUSTER, PositionListIndex
from dataprof.profiling.ucc_profiler import UCC, LevelResult, UCCProfiler

__all__ = [
    "AttributeList",
    "IND",
    "INDProfiler",
    "NO_CLUSTER",
    "PositionListIndex",
    "UCC",
    "LevelResult",
    "UCCProfiler",
]

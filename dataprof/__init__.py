"""
dataprof — data profiling for tabular relations.

Discovers minimal unique column combinations and unary inclusion
dependencies, and matches schemas by attribute similarity.

Quick start::

    from dataprof import UCCProfiler, read_relation
    relation = read_relation("people.csv")
    for ucc in UCCProfiler().profile(relation):
        print(ucc.names)
"""

from dataprof.config import ProfilingConfig
from dataprof.profiling import IND, UCC, AttributeList, INDProfiler, PositionListIndex, UCCProfiler
from dataprof.relation import Relation, read_relation, read_relations, relation_from_frame

__all__ = [
    "ProfilingConfig",
    "Relation",
    "read_relation",
    "read_relations",
    "relation_from_frame",
    "AttributeList",
    "PositionListIndex",
    "UCC",
    "UCCProfiler",
    "IND",
    "INDProfiler",
]
__version__ = "0.1.0"

"""Two-stage schema matching: similarity matrix, then correspondences."""

from dataprof.matching.first_line import FirstLineSchemaMatcher
from dataprof.matching.second_line import SecondLineSchemaMatcher
from dataprof.matching.structures import CorrespondenceMatrix, SimilarityMatrix

__all__ = [
    "FirstLineSchemaMatcher",
    "SecondLineSchemaMatcher",
    "SimilarityMatrix",
    "CorrespondenceMatrix",
]

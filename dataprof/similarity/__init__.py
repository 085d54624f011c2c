"""String and token similarity measures used by schema matching."""

from dataprof.similarity.jaccard import Jaccard
from dataprof.similarity.levenshtein import Levenshtein, edit_distance
from dataprof.similarity.measures import EMPTY_SIMILARITY, SimilarityMeasure
from dataprof.similarity.tokenizer import Tokenizer

__all__ = [
    "EMPTY_SIMILARITY",
    "Jaccard",
    "Levenshtein",
    "SimilarityMeasure",
    "Tokenizer",
    "edit_distance",
]

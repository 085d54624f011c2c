"""
First-line schema matcher: attribute-pair similarities.

Each source × target attribute pair is scored as a weighted sum of

* the Jaccard similarity of the lowercased attribute names, and
* the Jaccard similarity of the lowercased column values, joined by spaces,

both over padded character q-grams with set semantics.
"""

from __future__ import annotations

import logging

import numpy as np

from dataprof.config import ProfilingConfig
from dataprof.matching.structures import SimilarityMatrix
from dataprof.relation import Relation
from dataprof.similarity.jaccard import Jaccard
from dataprof.similarity.tokenizer import Tokenizer

__all__ = ["FirstLineSchemaMatcher"]

logger = logging.getLogger(__name__)


def _column_text(values: tuple[str | None, ...]) -> str:
    return " ".join(v for v in values if v is not None).lower()


class FirstLineSchemaMatcher:
    """Header + value Jaccard matcher."""

    def __init__(self, cfg: ProfilingConfig | None = None) -> None:
        self._cfg = cfg or ProfilingConfig()
        tokenizer = Tokenizer(self._cfg.qgram_size, self._cfg.qgram_padding)
        self._jaccard = Jaccard(tokenizer, bag_semantics=False)

    def match(self, source: Relation, target: Relation) -> SimilarityMatrix:
        cfg = self._cfg
        tokenize = self._jaccard.tokenizer.tokenize

        # Tokenize every header and column once, not once per pair.
        src_headers = [tokenize(name.lower()) for name in source.attribute_names]
        tgt_headers = [tokenize(name.lower()) for name in target.attribute_names]
        src_values = [tokenize(_column_text(col)) for col in source.columns]
        tgt_values = [tokenize(_column_text(col)) for col in target.columns]

        matrix = np.zeros((len(source), len(target)), dtype=np.float64)
        for i in range(len(source)):
            for j in range(len(target)):
                header_sim = self._jaccard.calculate_tokens(src_headers[i], tgt_headers[j])
                value_sim = self._jaccard.calculate_tokens(src_values[i], tgt_values[j])
                matrix[i, j] = cfg.header_weight * header_sim + cfg.value_weight * value_sim

        logger.debug("Scored %d attribute pairs of %s × %s", matrix.size, source.name, target.name)
        return SimilarityMatrix(matrix, source, target)

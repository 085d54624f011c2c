"""
Second-line schema matcher: similarities → one-to-one correspondences.

Greedy, highest similarity first: cells are visited in descending order of
similarity (ties in row-major order) and a cell is taken when neither its
source row nor its target column has been used yet.
"""

from __future__ import annotations

import numpy as np

from dataprof.matching.structures import CorrespondenceMatrix, SimilarityMatrix

__all__ = ["SecondLineSchemaMatcher"]


class SecondLineSchemaMatcher:
    """Greedy one-to-one assignment over a :class:`SimilarityMatrix`."""

    def match(self, similarity_matrix: SimilarityMatrix) -> CorrespondenceMatrix:
        sims = similarity_matrix.matrix
        n_rows, n_cols = sims.shape
        correspondence = np.zeros((n_rows, n_cols), dtype=np.int8)

        used_rows: set[int] = set()
        used_cols: set[int] = set()
        order = np.argsort(-sims, axis=None, kind="stable")
        for flat in order:
            if len(used_rows) == n_rows or len(used_cols) == n_cols:
                break
            row, col = divmod(int(flat), n_cols)
            if row in used_rows or col in used_cols:
                continue
            correspondence[row, col] = 1
            used_rows.add(row)
            used_cols.add(col)

        return CorrespondenceMatrix(
            correspondence, similarity_matrix.source, similarity_matrix.target,
        )

"""
Matrices exchanged between the two schema-matching stages.

Rows are the source relation's attributes, columns the target's.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from dataprof.relation import Relation

__all__ = ["SimilarityMatrix", "CorrespondenceMatrix"]


def _check_shape(matrix: np.ndarray, source: Relation, target: Relation) -> None:
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {matrix.ndim} dimensions")
    expected = (len(source), len(target))
    if matrix.shape != expected:
        raise ValueError(
            f"Matrix shape {matrix.shape} does not match "
            f"{source.name} × {target.name} {expected}"
        )


@dataclass(frozen=True, eq=False)
class SimilarityMatrix:
    """Pairwise attribute similarities in ``[0, 1]``."""

    matrix: np.ndarray
    source: Relation
    target: Relation

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", np.asarray(self.matrix, dtype=np.float64))
        _check_shape(self.matrix, self.source, self.target)

    @property
    def shape(self) -> tuple[int, int]:
        return self.matrix.shape


@dataclass(frozen=True, eq=False)
class CorrespondenceMatrix:
    """Binary matrix: ``1`` where a source attribute corresponds to a target attribute."""

    matrix: np.ndarray
    source: Relation
    target: Relation

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", np.asarray(self.matrix, dtype=np.int8))
        _check_shape(self.matrix, self.source, self.target)

    def correspondences(self) -> Iterator[tuple[str, str]]:
        """Yield ``(source attribute, target attribute)`` for every ``1`` cell."""
        for row, col in zip(*np.nonzero(self.matrix)):
            yield self.source.attribute_names[row], self.target.attribute_names[col]

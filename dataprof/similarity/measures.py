"""
Common contract of the similarity measures.

A measure compares two strings, or two ordered token sequences, and
returns a similarity in ``[0, 1]``.  ``None`` is read as the empty string.
Two empty inputs are identical: every measure returns
:data:`EMPTY_SIMILARITY` for them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

__all__ = ["EMPTY_SIMILARITY", "SimilarityMeasure"]

EMPTY_SIMILARITY = 1.0


class SimilarityMeasure(Protocol):
    """Protocol all similarity measures satisfy."""

    def calculate(self, string1: str | None, string2: str | None) -> float:
        ...

    def calculate_tokens(self, tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
        ...

"""
Levenshtein similarity: ``1 - distance / max(len1, len2)``.

The distance counts insertions, deletions and substitutions; with
``with_damerau`` an adjacent transposition also costs one edit (optimal
string alignment).  Strings are compared character by character, token
lists token by token.  The dynamic program keeps only three rows.
"""

from __future__ import annotations

from collections.abc import Sequence

from dataprof.similarity.measures import EMPTY_SIMILARITY

__all__ = ["Levenshtein", "edit_distance"]


def edit_distance(seq1: Sequence, seq2: Sequence, with_damerau: bool = False) -> int:
    """Return the (Damerau-)Levenshtein distance between two sequences."""
    n = len(seq1)
    before_upper = [0] * (n + 1)
    upper = list(range(n + 1))
    for j in range(1, len(seq2) + 1):
        lower = [j] + [0] * n
        for i in range(1, n + 1):
            cost = 0 if seq1[i - 1] == seq2[j - 1] else 1
            lower[i] = min(
                lower[i - 1] + 1,       # insertion
                upper[i] + 1,           # deletion
                upper[i - 1] + cost,    # substitution
            )
            if (
                with_damerau
                and i > 1
                and j > 1
                and seq1[i - 1] == seq2[j - 2]
                and seq1[i - 2] == seq2[j - 1]
            ):
                lower[i] = min(lower[i], before_upper[i - 2] + 1)
        before_upper, upper = upper, lower
    return upper[n]


class Levenshtein:
    """Normalised edit-distance similarity."""

    def __init__(self, with_damerau: bool = False) -> None:
        self.with_damerau = with_damerau

    def calculate(self, string1: str | None, string2: str | None) -> float:
        return self._similarity(string1 or "", string2 or "")

    def calculate_tokens(self, tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
        return self._similarity(tokens1, tokens2)

    def _similarity(self, seq1: Sequence, seq2: Sequence) -> float:
        longest = max(len(seq1), len(seq2))
        if longest == 0:
            return EMPTY_SIMILARITY
        return 1.0 - edit_distance(seq1, seq2, self.with_damerau) / longest

    def __repr__(self) -> str:
        return f"Levenshtein(with_damerau={self.with_damerau})"

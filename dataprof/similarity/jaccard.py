"""
Jaccard similarity with set or bag (multiset) semantics.

- **Set**: ``|A ∩ B| / |A ∪ B|`` over distinct tokens; maximum 1.
- **Bag**: ``Σ min(count_A, count_B) / (|A| + |B|)`` over token counts,
  the union being the plain concatenation of both token lists; maximum 1/2.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from dataprof.similarity.measures import EMPTY_SIMILARITY
from dataprof.similarity.tokenizer import Tokenizer

__all__ = ["Jaccard"]


class Jaccard:
    """Token-overlap similarity."""

    def __init__(self, tokenizer: Tokenizer | None = None, bag_semantics: bool = False) -> None:
        self.tokenizer = tokenizer or Tokenizer()
        self.bag_semantics = bag_semantics

    def calculate(self, string1: str | None, string2: str | None) -> float:
        """Tokenize both strings, then compare the token lists."""
        return self.calculate_tokens(
            self.tokenizer.tokenize(string1 or ""),
            self.tokenizer.tokenize(string2 or ""),
        )

    def calculate_tokens(self, tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
        if self.bag_semantics:
            union = len(tokens1) + len(tokens2)
            if union == 0:
                return EMPTY_SIMILARITY
            shared = Counter(tokens1) & Counter(tokens2)
            return sum(shared.values()) / union

        set1, set2 = set(tokens1), set(tokens2)
        union = set1 | set2
        if not union:
            return EMPTY_SIMILARITY
        return len(set1 & set2) / len(union)

    def __repr__(self) -> str:
        return f"Jaccard({self.tokenizer!r}, bag_semantics={self.bag_semantics})"

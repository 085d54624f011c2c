"""
Character q-gram tokenizer for similarity measures.

``Tokenizer(3, padding=True).tokenize("abc")`` frames the string with two
``#`` characters on each side and slides a window of three characters over
it::

    ['##a', '#ab', 'abc', 'bc#', 'c##']

Without padding, a string shorter than the window is its own single token.
The empty string has no tokens either way.
"""

from __future__ import annotations

__all__ = ["PAD_CHAR", "Tokenizer"]

PAD_CHAR = "#"


class Tokenizer:
    """Splits strings into overlapping character q-grams."""

    __slots__ = ("token_size", "padding")

    def __init__(self, token_size: int = 3, padding: bool = True) -> None:
        if token_size < 1:
            raise ValueError(f"token_size must be positive, got {token_size}")
        self.token_size = token_size
        self.padding = padding

    def tokenize(self, text: str | None) -> list[str]:
        if not text:
            return []
        if self.padding:
            pad = PAD_CHAR * (self.token_size - 1)
            text = f"{pad}{text}{pad}"
        elif len(text) < self.token_size:
            return [text]
        q = self.token_size
        return [text[i:i + q] for i in range(len(text) - q + 1)]

    def __repr__(self) -> str:
        return f"Tokenizer(token_size={self.token_size}, padding={self.padding})"

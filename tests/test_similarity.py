"""Tests for dataprof.similarity."""

import pytest

from dataprof.similarity import EMPTY_SIMILARITY, Jaccard, Levenshtein, Tokenizer, edit_distance


# ── Tokenizer ────────────────────────────────────────────────────────

class TestTokenizer:
    def test_padded_qgrams(self):
        assert Tokenizer(3, padding=True).tokenize("abc") == ["##a", "#ab", "abc", "bc#", "c##"]

    def test_unpadded_qgrams(self):
        assert Tokenizer(3, padding=False).tokenize("abcd") == ["abc", "bcd"]

    def test_short_string_unpadded(self):
        assert Tokenizer(3, padding=False).tokenize("ab") == ["ab"]

    def test_empty_and_none(self):
        tok = Tokenizer()
        assert tok.tokenize("") == []
        assert tok.tokenize(None) == []

    def test_bigram_padding(self):
        assert Tokenizer(2, padding=True).tokenize("a") == ["#a", "a#"]

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Tokenizer(0)


# ── Jaccard ──────────────────────────────────────────────────────────

class TestJaccard:
    def test_set_semantics(self):
        jac = Jaccard(Tokenizer(1, padding=False))
        assert jac.calculate("abc", "abd") == pytest.approx(0.5)

    def test_set_ignores_duplicates(self):
        jac = Jaccard(Tokenizer(1, padding=False))
        assert jac.calculate("aab", "ab") == pytest.approx(1.0)

    def test_bag_semantics(self):
        jac = Jaccard(Tokenizer(1, padding=False), bag_semantics=True)
        assert jac.calculate("aab", "ab") == pytest.approx(0.4)

    def test_bag_maximum_is_half(self):
        jac = Jaccard(Tokenizer(1, padding=False), bag_semantics=True)
        assert jac.calculate("ab", "ab") == pytest.approx(0.5)

    def test_disjoint(self):
        assert Jaccard().calculate("abc", "xyz") == 0.0

    @pytest.mark.parametrize("bag", [False, True])
    def test_empty_vs_empty(self, bag):
        jac = Jaccard(bag_semantics=bag)
        assert jac.calculate("", "") == EMPTY_SIMILARITY
        assert jac.calculate(None, "") == EMPTY_SIMILARITY
        assert jac.calculate_tokens([], []) == EMPTY_SIMILARITY

    def test_empty_vs_text(self):
        assert Jaccard().calculate("", "abc") == 0.0

    def test_tokens(self):
        jac = Jaccard()
        assert jac.calculate_tokens(["x", "y"], ["y", "z"]) == pytest.approx(1 / 3)

    def test_range(self):
        jac = Jaccard()
        for a, b in [("name", "names"), ("id", "identifier"), ("", "x")]:
            assert 0.0 <= jac.calculate(a, b) <= 1.0


# ── Levenshtein ──────────────────────────────────────────────────────

class TestLevenshtein:
    def test_distance(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_similarity(self):
        assert Levenshtein().calculate("kitten", "sitting") == pytest.approx(4 / 7)

    def test_identical(self):
        assert Levenshtein().calculate("same", "same") == 1.0

    def test_transposition_without_damerau(self):
        assert Levenshtein().calculate("ab", "ba") == pytest.approx(0.0)

    def test_transposition_with_damerau(self):
        assert Levenshtein(with_damerau=True).calculate("ab", "ba") == pytest.approx(0.5)

    def test_damerau_never_worse(self):
        for a, b in [("abcd", "acbd"), ("ca", "abc"), ("hello", "ehlol")]:
            assert edit_distance(a, b, with_damerau=True) <= edit_distance(a, b)

    def test_tokens(self):
        assert Levenshtein().calculate_tokens(["a", "b", "c"], ["a", "c"]) == pytest.approx(2 / 3)

    def test_token_transposition(self):
        lev = Levenshtein(with_damerau=True)
        assert lev.calculate_tokens(["first", "last"], ["last", "first"]) == pytest.approx(0.5)

    def test_empty_vs_empty(self):
        assert Levenshtein().calculate("", "") == EMPTY_SIMILARITY
        assert Levenshtein().calculate(None, None) == EMPTY_SIMILARITY
        assert Levenshtein().calculate_tokens([], []) == EMPTY_SIMILARITY

    def test_empty_vs_text(self):
        assert Levenshtein().calculate("", "abc") == 0.0

    def test_symmetric(self):
        lev = Levenshtein(with_damerau=True)
        assert lev.calculate("flaw", "lawn") == lev.calculate("lawn", "flaw")

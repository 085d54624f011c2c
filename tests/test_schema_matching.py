"""Tests for dataprof.matching."""

import numpy as np
import pytest

from dataprof.config import ProfilingConfig
from dataprof.matching import (
    CorrespondenceMatrix,
    FirstLineSchemaMatcher,
    SecondLineSchemaMatcher,
    SimilarityMatrix,
)
from dataprof.relation import Relation


def _relation(name, n_attrs):
    return Relation(name, [f"{name}{i}" for i in range(n_attrs)], [["v"] for _ in range(n_attrs)])


@pytest.fixture
def staff():
    return Relation(
        "staff",
        ["EmployeeName", "City", "Salary"],
        [
            ["Alice", "Bob", "Charlie"],
            ["Berlin", "Paris", "Rome"],
            ["50000", "60000", "70000"],
        ],
    )


@pytest.fixture
def workers():
    return Relation(
        "workers",
        ["town", "employee_name"],
        [
            ["Paris", "Rome", "Madrid"],
            ["Alice", "Charlie", "Dora"],
        ],
    )


# ── Structures ───────────────────────────────────────────────────────

class TestStructures:
    def test_shape_checked(self):
        with pytest.raises(ValueError):
            SimilarityMatrix(np.zeros((2, 2)), _relation("s", 2), _relation("t", 3))

    def test_requires_2d(self):
        with pytest.raises(ValueError):
            SimilarityMatrix(np.zeros(3), _relation("s", 3), _relation("t", 1))

    def test_correspondences(self):
        src, tgt = _relation("s", 2), _relation("t", 2)
        corr = CorrespondenceMatrix(np.array([[0, 1], [1, 0]]), src, tgt)
        assert list(corr.correspondences()) == [("s0", "t1"), ("s1", "t0")]


# ── First line ───────────────────────────────────────────────────────

class TestFirstLine:
    def test_identical_attribute(self):
        a = Relation("a", ["name"], [["x", "y"]])
        b = Relation("b", ["name"], [["x", "y"]])
        sims = FirstLineSchemaMatcher().match(a, b)
        assert sims.matrix[0, 0] == pytest.approx(1.0)

    def test_shape_and_range(self, staff, workers):
        sims = FirstLineSchemaMatcher().match(staff, workers)
        assert sims.shape == (3, 2)
        assert sims.source is staff
        assert sims.target is workers
        assert ((sims.matrix >= 0.0) & (sims.matrix <= 1.0)).all()

    def test_similar_columns_score_highest(self, staff, workers):
        sims = FirstLineSchemaMatcher().match(staff, workers).matrix
        # EmployeeName ↔ employee_name beats EmployeeName ↔ town
        assert sims[0, 1] > sims[0, 0]
        # City ↔ town (shared values) beats City ↔ employee_name
        assert sims[1, 0] > sims[1, 1]

    def test_weights(self):
        a = Relation("a", ["k"], [["1"]])
        b = Relation("b", ["k"], [["2"]])
        header_only = FirstLineSchemaMatcher(ProfilingConfig(header_weight=1.0, value_weight=0.0))
        value_only = FirstLineSchemaMatcher(ProfilingConfig(header_weight=0.0, value_weight=1.0))
        assert header_only.match(a, b).matrix[0, 0] == pytest.approx(1.0)
        assert value_only.match(a, b).matrix[0, 0] == pytest.approx(0.0)

    def test_nulls_ignored_in_values(self):
        a = Relation("a", ["x"], [[None, None]])
        b = Relation("b", ["x"], [[None]])
        # both value texts are empty: identical
        assert FirstLineSchemaMatcher().match(a, b).matrix[0, 0] == pytest.approx(1.0)


# ── Second line ──────────────────────────────────────────────────────

class TestSecondLine:
    def _match(self, values):
        arr = np.array(values, dtype=float)
        sims = SimilarityMatrix(arr, _relation("s", arr.shape[0]), _relation("t", arr.shape[1]))
        return SecondLineSchemaMatcher().match(sims).matrix

    def test_greedy_takes_best_first(self):
        result = self._match([[0.9, 0.8], [0.85, 0.1]])
        assert result.tolist() == [[1, 0], [0, 1]]

    def test_rectangular(self):
        result = self._match([[0.1, 0.5, 0.4], [0.2, 0.6, 0.3]])
        assert result.tolist() == [[0, 0, 1], [0, 1, 0]]

    def test_ties_row_major(self):
        result = self._match([[0.5, 0.5], [0.5, 0.5]])
        assert result.tolist() == [[1, 0], [0, 1]]

    def test_one_to_one(self):
        rng = np.random.default_rng(7)
        result = self._match(rng.random((5, 4)))
        assert (result.sum(axis=0) == 1).all()
        assert (result.sum(axis=1) <= 1).all()
        assert result.sum() == 4

    def test_end_to_end(self, staff, workers):
        sims = FirstLineSchemaMatcher().match(staff, workers)
        corr = SecondLineSchemaMatcher().match(sims)
        assert set(corr.correspondences()) == {("EmployeeName", "employee_name"), ("City", "town")}

    def test_empty_target(self):
        src = _relation("s", 2)
        empty = Relation("t", [], [])
        sims = SimilarityMatrix(np.zeros((2, 0)), src, empty)
        corr = SecondLineSchemaMatcher().match(sims)
        assert corr.matrix.shape == (2, 0)
        assert list(corr.correspondences()) == []

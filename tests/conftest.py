"""Shared fixtures and brute-force oracles for the profiling tests."""

from __future__ import annotations

import random
from itertools import combinations

import pytest

from dataprof.relation import Relation


def random_relation(
    seed: int, max_columns: int = 6, max_rows: int = 20, *, min_columns: int = 1,
) -> Relation:
    """A small relation over a tiny alphabet, so that duplicates are common."""
    rng = random.Random(seed)
    n_cols = rng.randint(min_columns, max_columns)
    n_rows = rng.randint(0, max_rows)
    alphabet = [str(v) for v in range(rng.randint(1, 4))] + [None]
    columns = [[rng.choice(alphabet) for _ in range(n_rows)] for _ in range(n_cols)]
    return Relation(f"random_{seed}", [f"c{i}" for i in range(n_cols)], columns)


def is_unique(relation: Relation, indices: tuple[int, ...]) -> bool:
    """Projection of *relation* onto *indices* has pairwise-distinct rows."""
    rows = list(zip(*(relation.column(i) for i in indices)))
    return len(set(rows)) == len(rows)


def brute_force_minimal_uccs(relation: Relation) -> set[tuple[int, ...]]:
    """Every minimal unique combination, by exhaustive enumeration."""
    minimal: set[tuple[int, ...]] = set()
    for size in range(1, len(relation) + 1):
        for combo in combinations(range(len(relation)), size):
            if any(set(m) <= set(combo) for m in minimal):
                continue
            if is_unique(relation, combo):
                minimal.add(combo)
    return minimal


@pytest.fixture
def people() -> Relation:
    return Relation(
        "people",
        ["id", "first", "last", "city"],
        [
            ["1", "2", "3", "4", "5"],
            ["Ann", "Bob", "Ann", "Cid", "Bob"],
            ["Lee", "Lee", "Kim", "Kim", "Kim"],
            ["Oslo", "Rome", "Oslo", "Rome", "Rome"],
        ],
    )

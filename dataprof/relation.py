"""
Relation — the tabular input shared by every profiler.

A relation is an ordered list of attribute names and one column of string
values per attribute.  ``None`` is the null sentinel.  Relations are
immutable once loaded and compare by identity, so two files with the same
content are still two relations.

Loading goes through Polars, reading every column as a string: profiling
compares raw cell values, never parsed numbers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import polars as pl

from dataprof.config import ProfilingConfig

__all__ = [
    "Relation",
    "relation_from_frame",
    "read_relation",
    "read_relations",
]

logger = logging.getLogger(__name__)


class Relation:
    """An immutable, column-oriented table.

    Parameters
    ----------
    name : str
        Table name (the file stem when loaded from disk).
    attribute_names : Sequence[str]
        Column headers, in column order.
    columns : Sequence[Sequence[str | None]]
        One value sequence per attribute.  All columns must have the same
        length; a ragged relation is rejected with ``ValueError``.
    """

    __slots__ = ("_name", "_attribute_names", "_columns", "_row_count")

    def __init__(
        self,
        name: str,
        attribute_names: Sequence[str],
        columns: Sequence[Sequence[str | None]],
    ) -> None:
        if len(attribute_names) != len(columns):
            raise ValueError(
                f"Relation {name!r} has {len(attribute_names)} attribute names "
                f"but {len(columns)} columns"
            )
        lengths = {len(col) for col in columns}
        if len(lengths) > 1:
            raise ValueError(
                f"Relation {name!r} is ragged: column lengths {sorted(lengths)}"
            )
        self._name = name
        self._attribute_names: tuple[str, ...] = tuple(attribute_names)
        self._columns: tuple[tuple[str | None, ...], ...] = tuple(tuple(col) for col in columns)
        self._row_count = lengths.pop() if lengths else 0

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def attribute_names(self) -> tuple[str, ...]:
        return self._attribute_names

    @property
    def columns(self) -> tuple[tuple[str | None, ...], ...]:
        return self._columns

    @property
    def row_count(self) -> int:
        return self._row_count

    def column(self, index: int) -> tuple[str | None, ...]:
        return self._columns[index]

    def index_of(self, attribute_name: str) -> int:
        """Return the column index of *attribute_name* (``ValueError`` if absent)."""
        try:
            return self._attribute_names.index(attribute_name)
        except ValueError:
            raise ValueError(
                f"Relation {self._name!r} has no attribute {attribute_name!r}"
            ) from None

    def __len__(self) -> int:
        return len(self._attribute_names)

    def __repr__(self) -> str:
        return (
            f"Relation({self._name!r}, attributes={len(self)}, rows={self._row_count})"
        )


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def relation_from_frame(df: pl.DataFrame, name: str) -> Relation:
    """Build a :class:`Relation` from a Polars DataFrame.

    Every column is cast to ``Utf8`` first; nulls stay ``None``.
    """
    columns = [df[col].cast(pl.Utf8).to_list() for col in df.columns]
    return Relation(name, df.columns, columns)


def read_relation(path: Path, cfg: ProfilingConfig | None = None) -> Relation:
    """Load one CSV file as a :class:`Relation` named after the file stem."""
    if cfg is None:
        cfg = ProfilingConfig()
    path = Path(path)
    logger.info("Reading CSV: %s", path)
    df = pl.read_csv(
        path,
        separator=cfg.csv_separator,
        infer_schema_length=cfg.infer_schema_length,
        null_values=list(cfg.null_values),
    )
    return relation_from_frame(df, path.stem)


def read_relations(
    directory: Path,
    cfg: ProfilingConfig | None = None,
    *,
    glob: str = "*.csv",
) -> Iterator[Relation]:
    """Yield a :class:`Relation` for every file matching *glob* under *directory*."""
    directory = Path(directory)
    paths = sorted(directory.glob(glob))
    if not paths:
        logger.warning("No files matching %s in %s", glob, directory)
    for path in paths:
        yield read_relation(path, cfg)

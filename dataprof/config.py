"""
dataprof configuration — every tunable knob in one place.

Override via ``ProfilingConfig(max_workers=4, ...)``.

Origin mapping
--------------
- max_workers / parallel_min_candidates → UCC lattice search (per-level join fan-out)
- csv_separator / null_values           → relation loading
- qgram_size / qgram_padding            → first-line schema matcher tokenizer
- header_weight / value_weight          → first-line schema matcher scoring
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfilingConfig:
    """Immutable configuration for all dataprof subsystems."""

    # ── UCC lattice search ───────────────────────────────────────────
    max_workers: int = 1
    """Worker threads used for the PLI intersections of one lattice level.
    ``1`` keeps the whole search on the calling thread."""

    parallel_min_candidates: int = 64
    """A level is only fanned out to the worker pool once it has at least
    this many candidates; smaller levels are cheaper to run inline."""

    # ── Relation loading ─────────────────────────────────────────────
    csv_separator: str = ","
    """Field delimiter for CSV input."""

    null_values: tuple[str, ...] = ("",)
    """Cell contents read as null.  Nulls are a single value: two null
    cells of the same column fall into the same cluster."""

    infer_schema_length: int = 0
    """Passed to ``polars.read_csv``.  ``0`` reads every column as a string,
    which is what profiling compares."""

    # ── Schema matching ──────────────────────────────────────────────
    qgram_size: int = 3
    """Character q-gram length of the matcher's tokenizer."""

    qgram_padding: bool = True
    """Frame strings with ``qgram_size - 1`` pad characters before
    tokenizing, so that prefixes and suffixes yield their own q-grams."""

    header_weight: float = 0.6
    """Weight of the attribute-name similarity in the first-line matcher."""

    value_weight: float = 0.4
    """Weight of the attribute-value similarity in the first-line matcher."""

    # ── Logging ──────────────────────────────────────────────────────
    log_level: str = "WARNING"
    """Default level of the ``dataprof`` logger when driven from the CLI."""

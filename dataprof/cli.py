"""
dataprof CLI — command-line interface for relation profiling.

Commands
--------
- ``uccs`` — minimal unique column combinations of one CSV file.
- ``inds`` — unary inclusion dependencies among CSV files.
- ``match`` — schema matching between two CSV files.
- ``keys`` — UCCs + INDs of a directory, reported as PK/FK candidates.

Usage::

    dataprof uccs ./tables/people.csv --workers 4
    dataprof inds ./tables/people.csv ./tables/orders.csv
    dataprof match ./a.csv ./b.csv
    dataprof keys ./tables
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import click
import polars as pl
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dataprof.config import ProfilingConfig

console = Console()

_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(str(exc))


# ── Shared options ───────────────────────────────────────────────────

@click.group()
@click.version_option(package_name="dataprof")
@click.option("--verbose", "-v", is_flag=True, help="Log per-level search statistics.")
@click.option("--separator", default=",", show_default=True, help="CSV field delimiter.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, separator: str) -> None:
    """dataprof — UCC / IND discovery and schema matching for CSV relations."""
    cfg = ProfilingConfig(csv_separator=separator)
    logging.basicConfig(
        level=logging.DEBUG if verbose else cfg.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    ctx.obj = cfg


# ── uccs ─────────────────────────────────────────────────────────────

@main.command("uccs")
@click.argument("file", type=_PATH)
@click.option("--workers", default=1, show_default=True, help="Threads per lattice level.")
@click.pass_obj
def uccs(cfg: ProfilingConfig, file: Path, workers: int) -> None:
    """List the minimal unique column combinations of FILE."""
    from dataprof.profiling.ucc_profiler import UCCProfiler
    from dataprof.relation import read_relation

    cfg = replace(cfg, max_workers=workers)
    try:
        relation = read_relation(file, cfg)
        found = UCCProfiler(cfg).profile(relation)
    except (ValueError, pl.exceptions.PolarsError) as exc:
        raise _fail(exc) from exc

    table = Table(title=f"Minimal UCCs of {relation.name}")
    table.add_column("#", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Columns")
    for i, ucc in enumerate(found, 1):
        table.add_row(str(i), str(len(ucc.attributes)), ", ".join(ucc.names))

    console.print(table)
    console.print(f"{len(found)} UCC(s) over {relation.row_count} rows")


# ── inds ─────────────────────────────────────────────────────────────

@main.command("inds")
@click.argument("files", nargs=-1, required=True, type=_PATH)
@click.option("--nary", is_flag=True, help="Request n-ary INDs (unsupported).")
@click.pass_obj
def inds(cfg: ProfilingConfig, files: tuple[Path, ...], nary: bool) -> None:
    """List the unary inclusion dependencies among FILES."""
    from dataprof.profiling.ind_profiler import INDProfiler
    from dataprof.relation import read_relation

    try:
        relations = [read_relation(f, cfg) for f in files]
        found = INDProfiler().profile(relations, discover_nary=nary)
    except (ValueError, NotImplementedError, pl.exceptions.PolarsError) as exc:
        raise _fail(exc) from exc

    table = Table(title="Unary inclusion dependencies")
    table.add_column("Dependent")
    table.add_column("⊆", justify="center", style="dim")
    table.add_column("Referenced")
    for ind in found:
        table.add_row(
            f"{ind.dependent.name}.{ind.dependent_name}",
            "⊆",
            f"{ind.referenced.name}.{ind.referenced_name}",
        )

    console.print(table)
    console.print(f"{len(found)} IND(s)")


# ── match ────────────────────────────────────────────────────────────

@main.command("match")
@click.argument("source", type=_PATH)
@click.argument("target", type=_PATH)
@click.pass_obj
def match(cfg: ProfilingConfig, source: Path, target: Path) -> None:
    """Match the attributes of SOURCE to the attributes of TARGET."""
    from dataprof.matching.first_line import FirstLineSchemaMatcher
    from dataprof.matching.second_line import SecondLineSchemaMatcher
    from dataprof.relation import read_relation

    try:
        src = read_relation(source, cfg)
        tgt = read_relation(target, cfg)
    except (ValueError, pl.exceptions.PolarsError) as exc:
        raise _fail(exc) from exc

    similarities = FirstLineSchemaMatcher(cfg).match(src, tgt)
    correspondences = SecondLineSchemaMatcher().match(similarities)

    table = Table(title=f"Correspondences {src.name} → {tgt.name}")
    table.add_column(src.name)
    table.add_column(tgt.name)
    table.add_column("Similarity", justify="right")
    for s_name, t_name in correspondences.correspondences():
        score = similarities.matrix[src.index_of(s_name), tgt.index_of(t_name)]
        table.add_row(s_name, t_name, f"{score:.3f}")

    console.print(table)


# ── keys ─────────────────────────────────────────────────────────────

@main.command("keys")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--glob", "pattern", default="*.csv", show_default=True)
@click.pass_obj
def keys(cfg: ProfilingConfig, directory: Path, pattern: str) -> None:
    """Report primary-key / foreign-key candidates across a directory of tables."""
    from dataprof.graph.dependency_graph import Dependency, DependencyGraph
    from dataprof.profiling.ind_profiler import INDProfiler
    from dataprof.profiling.ucc_profiler import UCCProfiler
    from dataprof.relation import read_relations

    try:
        relations = list(read_relations(directory, cfg, glob=pattern))
        profiler = UCCProfiler(cfg)
        graph = DependencyGraph()
        for relation in relations:
            graph.add_uccs(profiler.profile(relation))
        graph.add_inds(INDProfiler().profile(relations))
    except (ValueError, pl.exceptions.PolarsError) as exc:
        raise _fail(exc) from exc

    graph.build_pkfk()

    table = Table(title=f"PK/FK candidates in {directory}")
    table.add_column("Foreign key")
    table.add_column("Primary key")
    pkfk = sorted(
        graph.edges(Dependency.PKFK), key=lambda edge: (edge[0].sort_key(), edge[1].sort_key()),
    )
    for fk, pk in pkfk:
        table.add_row(str(fk), str(pk))

    console.print(table)
    console.print(f"{len(relations)} relation(s), {len(graph.primary_keys())} referenced key(s)")


if __name__ == "__main__":
    main()

"""Graph view over profiling results."""

from dataprof.graph.dependency_graph import ColumnRef, Dependency, DependencyGraph

__all__ = ["ColumnRef", "Dependency", "DependencyGraph"]

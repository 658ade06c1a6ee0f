"""
Dependency graph module.

This package contains the graph representation of library declarations,
built on networkx.
"""

from dependency_resolver.graph.dependency_graph import DependencyGraph

__all__ = [
    "DependencyGraph",
]

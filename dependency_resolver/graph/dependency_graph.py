"""
Dependency graph for library declarations.

This module defines the DependencyGraph class, which uses networkx to
store the direct dependencies of every declared library together with the
order in which libraries were first declared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

import networkx as nx

if TYPE_CHECKING:
    from dependency_resolver.models.declaration import Declaration


class DependencyGraph:
    """Directed graph of direct library dependencies.

    Nodes are library names and an edge ``A -> B`` means A directly depends
    on B. Libraries that appeared on the left-hand side of a declaration are
    marked ``declared=True``; names that only ever appear as dependencies are
    leaves with ``declared=False``.

    Successor order in the underlying DiGraph follows insertion order, so
    direct dependencies come back in the order they were written.

    Attributes:
        graph: networkx DiGraph object holding the dependencies.

    Example:
        >>> graph = DependencyGraph()
        >>> graph.set_dependencies("X", ["Y", "R"])
        False
        >>> graph.get_direct_dependencies("X")
        ['Y', 'R']
        >>> graph.libraries
        ['X']
    """

    def __init__(self) -> None:
        """Initialize an empty DependencyGraph."""
        self.graph = nx.DiGraph()
        self._order: list[str] = []

    def set_dependencies(self, library: str, dependencies: Iterable[str]) -> bool:
        """Insert or overwrite the direct dependencies of a library.

        A redeclared library keeps its original position in the input order
        but its previous dependency set is replaced entirely.

        Args:
            library: Library name.
            dependencies: Direct dependency names; duplicates are collapsed
                to their first occurrence.

        Returns:
            True if the library had already been declared, False otherwise.
        """
        redeclared = self.is_declared(library)

        if redeclared:
            previous = list(self.graph.successors(library))
            self.graph.remove_edges_from(
                [(library, dep) for dep in previous]
            )
            self._drop_orphans(previous)
        else:
            self._order.append(library)

        self.graph.add_node(library, declared=True)

        for dep in dict.fromkeys(dependencies):
            if dep not in self.graph:
                self.graph.add_node(dep, declared=False)
            self.graph.add_edge(library, dep)

        return redeclared

    def add_declaration(self, declaration: Declaration) -> bool:
        """Add a parsed Declaration. See set_dependencies."""
        return self.set_dependencies(
            declaration.library, declaration.dependencies
        )

    def _drop_orphans(self, names: list[str]) -> None:
        # Leaves no longer referenced by anyone after an overwrite
        for name in names:
            if (
                name in self.graph
                and not self.graph.nodes[name].get("declared")
                and self.graph.in_degree(name) == 0
            ):
                self.graph.remove_node(name)

    @property
    def libraries(self) -> list[str]:
        """Declared library names in first-seen order."""
        return list(self._order)

    def is_declared(self, name: str) -> bool:
        """Return True if name appeared on the left-hand side of a line."""
        return name in self.graph and bool(
            self.graph.nodes[name].get("declared")
        )

    def get_direct_dependencies(self, name: str) -> list[str]:
        """Get the direct dependencies of a library.

        Args:
            name: Library name.

        Returns:
            Direct dependency names in written order. Empty for names that
            were never declared.
        """
        if not self.is_declared(name):
            return []
        return list(self.graph.successors(name))

    def get_leaves(self) -> list[str]:
        """Names that are only ever used as dependencies."""
        return [
            node
            for node, declared in self.graph.nodes(data="declared")
            if not declared
        ]

    def find_cycles(self) -> list[list[str]]:
        """Find groups of libraries that depend on each other in a loop.

        Each group is a strongly connected component with more than one
        member, or a single library that depends on itself. Runs in
        O(V+E); individual cycles inside a group are not enumerated.

        Returns:
            List of cycle groups, each a list of library names in graph
            insertion order. Groups are ordered by their first member.
        """
        self_loops = set(nx.nodes_with_selfloops(self.graph))
        position = {node: index for index, node in enumerate(self.graph)}

        groups = [
            sorted(component, key=position.__getitem__)
            for component in nx.strongly_connected_components(self.graph)
            if len(component) > 1 or component & self_loops
        ]
        return sorted(groups, key=lambda group: position[group[0]])

    def to_dict(self) -> dict[str, Any]:
        """Export graph to dictionary format.

        Returns:
            Dictionary containing the ordered library list, nodes and edges,
            suitable for JSON serialization.
        """
        return {
            "libraries": self.libraries,
            "nodes": [
                {"id": node, "declared": bool(data.get("declared"))}
                for node, data in self.graph.nodes(data=True)
            ],
            "edges": [
                {"source": u, "target": v} for u, v in self.graph.edges()
            ],
        }

    def get_statistics(self) -> dict[str, int]:
        """Get graph statistics.

        ``max_depth`` is the length of the longest dependency chain, and is
        only computed for acyclic graphs (-1 otherwise).

        Returns:
            Dictionary containing graph statistics.
        """
        is_acyclic = nx.is_directed_acyclic_graph(self.graph)
        max_depth = nx.dag_longest_path_length(self.graph) if is_acyclic else -1

        return {
            "declared_libraries": len(self._order),
            "leaf_libraries": len(self.get_leaves()),
            "total_nodes": self.graph.number_of_nodes(),
            "total_edges": self.graph.number_of_edges(),
            "max_depth": max_depth,
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_declared(name)

    def __len__(self) -> int:
        return len(self._order)

"""
Transitive dependency resolver.

This module defines the TransitiveDependencyResolver class, which computes
the full set of dependencies reachable from each declared library and
renders the dependency report.
"""

from typing import Dict, Iterator, List, Optional, Set

from dependency_resolver.graph.dependency_graph import DependencyGraph


class TransitiveDependencyResolver:
    """Transitive dependency resolver.

    Responsibilities:
    1. Compute the transitive closure of a library (closure)
    2. Resolve every declared library in first-seen order (resolve_all)
    3. Render the textual report (render)
    4. Reverse lookup of dependents (find_dependents)

    Core algorithm: iterative Depth-First Search with a visited set

    Usage:
        resolver = TransitiveDependencyResolver(graph)

        resolver.closure("X")  # ['Y', 'Z', 'R']
        print(resolver.render())
    """

    def __init__(self, graph: DependencyGraph) -> None:
        """Initialize a TransitiveDependencyResolver.

        Args:
            graph: Fully built DependencyGraph. It is only read.
        """
        self.graph = graph

    def closure(self, name: str) -> List[str]:
        """Get every dependency reachable from a library.

        Algorithm: Depth-First Search, pre-order
        1. Walk the direct dependencies of ``name`` in written order
        2. Every encountered name goes into the result once
        3. A name is expanded only the first time it is seen
        4. ``name`` itself shows up only if a cycle leads back to it

        An explicit stack of iterators replaces recursion, so the length of
        a dependency chain is not limited by the interpreter's recursion
        limit.

        Args:
            name: Library name.

        Returns:
            Dependency names in first-discovery order, without duplicates.
            Empty for names that were never declared.
        """
        result: Dict[str, None] = {}
        visited: Set[str] = set()
        stack: List[Iterator[str]] = [
            iter(self.graph.get_direct_dependencies(name))
        ]

        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                stack.pop()
                continue

            result.setdefault(dep, None)
            if dep not in visited:
                visited.add(dep)
                stack.append(iter(self.graph.get_direct_dependencies(dep)))

        return list(result)

    def resolve_all(self) -> Dict[str, List[str]]:
        """Resolve every declared library.

        Returns:
            Mapping of library name to its closure, in first-seen order.
        """
        return {
            library: self.closure(library) for library in self.graph.libraries
        }

    def render(self) -> str:
        """Render the dependency report.

        Returns:
            One "<library> depends on <d1> <d2> ..." line per declared
            library, in first-seen order.
        """
        return "\n".join(
            format_line(library, deps)
            for library, deps in self.resolve_all().items()
        )

    def find_dependents(
        self, name: str, closures: Optional[Dict[str, List[str]]] = None
    ) -> List[str]:
        """Find declared libraries that depend on ``name``, directly or not.

        Args:
            name: Library name (declared or leaf).
            closures: Already resolved closures, as returned by
                resolve_all. Computed here if not given.

        Returns:
            Declared library names in first-seen order.
        """
        if closures is None:
            closures = self.resolve_all()

        return [
            library
            for library in self.graph.libraries
            if name in closures.get(library, ())
        ]

    def find_cycles(self) -> List[List[str]]:
        """Cycles in the graph. They never stop resolution."""
        return self.graph.find_cycles()


def format_line(library: str, dependencies: List[str]) -> str:
    """Format one report line."""
    return f"{library} depends on {' '.join(dependencies)}"

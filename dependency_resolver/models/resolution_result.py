"""
Resolution result model.

This module defines the ResolutionResult class, which bundles a parsed
dependency graph with the resolved closures of all declared libraries.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tabulate import tabulate

from dependency_resolver.graph.dependency_graph import DependencyGraph
from dependency_resolver.models.config import ResolverConfig
from dependency_resolver.resolver.transitive_resolver import (
    TransitiveDependencyResolver,
    format_line,
)
from dependency_resolver.utils.warnings import DependencyWarning


@dataclass
class ResolutionResult:
    """Dependency resolution result.

    Contains:
    1. DependencyGraph (direct dependencies and first-seen order)
    2. Resolved closures for every declared library
    3. Warnings collected while parsing and resolving

    Attributes:
        graph: Dependency graph.
        closures: Library name -> transitive dependencies, first-seen order.
        warnings: Collected warnings.
        config: Configuration.
    """

    graph: DependencyGraph
    closures: Dict[str, List[str]]
    warnings: List[DependencyWarning] = field(default_factory=list)
    config: ResolverConfig = field(default_factory=ResolverConfig)
    _resolver: Optional[TransitiveDependencyResolver] = field(
        default=None, init=False, repr=False
    )

    @property
    def libraries(self) -> List[str]:
        """Declared libraries in first-seen order."""
        return self.graph.libraries

    @property
    def resolver(self) -> TransitiveDependencyResolver:
        """Lazy-load the resolver used for follow-up queries."""
        if self._resolver is None:
            self._resolver = TransitiveDependencyResolver(self.graph)
        return self._resolver

    def get_dependencies(self, library: str) -> List[str]:
        """Get the resolved closure of a library.

        Undeclared names are resolved on demand and come back empty.
        """
        if library in self.closures:
            return list(self.closures[library])
        return self.resolver.closure(library)

    def dependents(self, library: str) -> List[str]:
        """Declared libraries whose closure contains ``library``."""
        return self.resolver.find_dependents(library, self.closures)

    def to_lines(self) -> List[str]:
        """Report lines, one per declared library."""
        return [format_line(name, deps) for name, deps in self.closures.items()]

    def to_text(self) -> str:
        """Report text, lines joined with newlines."""
        return "\n".join(self.to_lines())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (for serialization).

        Returns:
            Dictionary with the ordered closures, the graph and warnings.
        """
        return {
            "dependencies": {name: list(deps) for name, deps in self.closures.items()},
            "graph": self.graph.to_dict(),
            "statistics": self.graph.get_statistics(),
            "warnings": [warning.to_dict() for warning in self.warnings],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert the closures to a JSON string."""
        return json.dumps(
            {name: list(deps) for name, deps in self.closures.items()},
            indent=indent,
            ensure_ascii=False,
        )

    def to_table(self, tablefmt: str = "grid") -> str:
        """Render the result as a table.

        Columns: library, direct dependencies, transitive dependencies and
        the size of the closure.
        """
        rows = [
            [
                name,
                " ".join(self.graph.get_direct_dependencies(name)),
                " ".join(deps),
                len(deps),
            ]
            for name, deps in self.closures.items()
        ]
        return tabulate(
            rows,
            headers=["Library", "Direct", "All dependencies", "Count"],
            tablefmt=tablefmt,
        )

"""
Dependency analyzer facade.

This module defines the DependencyAnalyzer class, which runs the two stages
of a resolution (parse, then resolve) and returns a ResolutionResult.
"""

from pathlib import Path
from typing import Optional, Union

from dependency_resolver.graph.dependency_graph import DependencyGraph
from dependency_resolver.models.config import ResolverConfig
from dependency_resolver.models.resolution_result import ResolutionResult
from dependency_resolver.parser.declaration_parser import DeclarationParser
from dependency_resolver.resolver.transitive_resolver import (
    TransitiveDependencyResolver,
)
from dependency_resolver.utils.warnings import WarningCollector


class DependencyAnalyzer:
    """Entry point for resolving declaration text or files.

    The graph is completely built before any closure is computed; the two
    stages never interleave.

    Usage:
        analyzer = DependencyAnalyzer()
        result = analyzer.analyze_file("deps.txt")
        print(result.to_text())
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        """Initialize a DependencyAnalyzer.

        Args:
            config: Resolver configuration (defaults to ResolverConfig()).
        """
        self.config = config or ResolverConfig()

    def analyze_text(self, text: str) -> ResolutionResult:
        """Parse and resolve declaration text.

        Raises:
            DependencyError: Any parse failure, see DeclarationParser.
        """
        warnings = WarningCollector()
        graph = DeclarationParser(self.config, warnings).parse_text(text)
        return self._resolve(graph, warnings)

    def analyze_file(self, path: Union[str, Path]) -> ResolutionResult:
        """Read, parse and resolve a declaration file.

        Raises:
            DependencyError: Read or parse failure, see DeclarationParser.
        """
        warnings = WarningCollector()
        graph = DeclarationParser(self.config, warnings).parse_file(path)
        return self._resolve(graph, warnings)

    def _resolve(
        self, graph: DependencyGraph, warnings: WarningCollector
    ) -> ResolutionResult:
        resolver = TransitiveDependencyResolver(graph)

        if self.config.report_cycles:
            for cycle in resolver.find_cycles():
                warnings.add_cycle_warning(cycle)

        return ResolutionResult(
            graph=graph,
            closures=resolver.resolve_all(),
            warnings=warnings.get_all(),
            config=self.config,
        )

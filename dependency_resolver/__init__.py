"""
Dependency Resolver v1.0

Reads "A depends on B C" declarations, one per line, and resolves the full
transitive set of dependencies for every declared library.

Example:
    >>> from dependency_resolver import DependencyAnalyzer
    >>> result = DependencyAnalyzer().analyze_text(
    ...     "X depends on Y R\\nY depends on Z"
    ... )
    >>> print(result.to_text())
    X depends on Y Z R
    Y depends on Z
"""

from dependency_resolver.version import __version__, __version_info__

__author__ = "Dependency Resolver Contributors"

from dependency_resolver.exceptions import (
    DependencyError,
    DuplicateDeclarationError,
    EmptyInputError,
    InputFileNotFoundError,
    InvalidLineFormatError,
)
from dependency_resolver.models.config import ErrorMode, ResolverConfig
from dependency_resolver.models.declaration import Declaration
from dependency_resolver.models.resolution_result import ResolutionResult
from dependency_resolver.graph.dependency_graph import DependencyGraph
from dependency_resolver.parser.declaration_parser import DeclarationParser
from dependency_resolver.resolver.transitive_resolver import (
    TransitiveDependencyResolver,
)
from dependency_resolver.analyzer.dependency_analyzer import DependencyAnalyzer
from dependency_resolver.utils.warnings import DependencyWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core
    "DependencyAnalyzer",
    "DeclarationParser",
    "TransitiveDependencyResolver",
    "DependencyGraph",
    # Configuration
    "ResolverConfig",
    "ErrorMode",
    # Results
    "Declaration",
    "ResolutionResult",
    "DependencyWarning",
    "WarningCollector",
    # Exceptions
    "DependencyError",
    "InputFileNotFoundError",
    "EmptyInputError",
    "InvalidLineFormatError",
    "DuplicateDeclarationError",
]

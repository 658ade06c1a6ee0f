"""
Parser module for dependency declarations.

This package contains the parser that turns declaration text into a
DependencyGraph.
"""

from dependency_resolver.parser.declaration_parser import (
    DECLARATION_PATTERN,
    DeclarationParser,
)

__all__ = ["DECLARATION_PATTERN", "DeclarationParser"]

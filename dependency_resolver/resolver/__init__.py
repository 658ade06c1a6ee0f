"""
Resolver module for dependency analysis.

This module provides the transitive dependency resolver.
"""

from dependency_resolver.resolver.transitive_resolver import (
    TransitiveDependencyResolver,
    format_line,
)

__all__ = ["TransitiveDependencyResolver", "format_line"]

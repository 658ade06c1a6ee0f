"""
Data models for dependency resolution.

This package contains the core data structures: parsed declarations,
configuration and resolution results.
"""

from dependency_resolver.models.config import ErrorMode, ResolverConfig
from dependency_resolver.models.declaration import Declaration
from dependency_resolver.models.resolution_result import ResolutionResult

__all__ = [
    "Declaration",
    "ErrorMode",
    "ResolutionResult",
    "ResolverConfig",
]

"""
Analyzer module.

This package contains the facade that parses and resolves declarations in
one call.
"""

from dependency_resolver.analyzer.dependency_analyzer import DependencyAnalyzer

__all__ = ["DependencyAnalyzer"]

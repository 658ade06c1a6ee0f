"""
Utility helpers for dependency resolution.
"""

from dependency_resolver.utils.warnings import DependencyWarning, WarningCollector

__all__ = [
    "DependencyWarning",
    "WarningCollector",
]

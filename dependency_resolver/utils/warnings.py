"""
Warning system for dependency resolution.

This module defines warning collection for the dependency resolver. Library
code never prints; non-fatal findings (redeclared libraries, cycles) are
recorded here and reported by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class DependencyWarning:
    """Warning or error message produced while resolving dependencies.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        context: Optional context information (e.g., the source line).

    Example:
        >>> warning = DependencyWarning(
        ...     level="WARNING",
        ...     message="Library 'A' redeclared",
        ...     context="A depends on C",
        ... )
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )

    def to_dict(self) -> dict[str, Optional[str]]:
        return {"level": self.level, "message": self.message, "context": self.context}


class WarningCollector:
    """Collects warnings during parsing and resolution.

    Attributes:
        warnings: List of DependencyWarning objects, in the order added.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add_redeclaration_warning("A", 3)
        >>> [w.level for w in collector.get_all()]
        ['WARNING']
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[DependencyWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            context: Optional context information.
        """
        self.warnings.append(
            DependencyWarning(level=level, message=message, context=context)
        )

    def get_all(self) -> list[DependencyWarning]:
        """Get a copy of all collected warnings, in the order added."""
        return self.warnings.copy()

    def add_redeclaration_warning(
        self,
        library: str,
        line_number: Optional[int] = None,
        context: Optional[str] = None,
    ) -> None:
        """Add a warning when a library is declared a second time.

        Args:
            library: Name of the redeclared library.
            line_number: Line of the later declaration, if known.
            context: Optional source line.
        """
        where = f" on line {line_number}" if line_number is not None else ""
        message = (
            f"Library '{library}' redeclared{where}. "
            f"Earlier dependencies are replaced."
        )
        self.add("WARNING", message, context)

    def add_cycle_warning(self, group: list[str]) -> None:
        """Add an informational note about a group of cyclic libraries.

        Args:
            group: Libraries that reach each other through their
                dependencies (or a single self-dependent library).
        """
        self.add("INFO", f"Dependency cycle detected among: {', '.join(group)}")

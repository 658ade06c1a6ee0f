"""
Declaration model.

This module defines the Declaration class, which represents a single parsed
line of a dependency file: one library and its direct dependencies.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, eq=True)
class Declaration:
    """A single "<library> depends on <deps>" line.

    Declarations are immutable and hashable. Dependency order follows the
    order written on the line; repeated names on the same line are kept
    only at their first position.

    Attributes:
        library: Name on the left-hand side of "depends on" (required).
        dependencies: Direct dependency names, in written order (required).
        line_number: Optional 1-based line number in the source text.
        raw: Optional original line text.

    Example:
        >>> decl = Declaration(library="X", dependencies=("Y", "R"))
        >>> decl.to_line()
        'X depends on Y R'
    """

    library: str
    dependencies: tuple[str, ...]
    line_number: Optional[int] = None
    raw: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that required fields are not empty."""
        if not self.library:
            raise ValueError("library name cannot be empty")
        if not self.dependencies:
            raise ValueError("a declaration needs at least one dependency")

    def to_line(self) -> str:
        """Return the declaration in canonical single-spaced form."""
        return f"{self.library} depends on {' '.join(self.dependencies)}"

    def __str__(self) -> str:
        return self.to_line()

"""
Configuration model for dependency resolution.

This module defines the ResolverConfig class and ErrorMode enum, which control
how the parser treats redeclared libraries and how input files are read.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorMode(str, Enum):
    """Enumeration of error handling modes.

    Attributes:
        FAIL: Raise an exception immediately.
        WARN: Record a warning and continue.
        IGNORE: Continue silently.

    Example:
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values."""
        return [member.value for member in cls]


@dataclass
class ResolverConfig:
    """Configuration settings for dependency resolution.

    Attributes:
        on_redeclaration: What to do when a library appears on the left-hand
            side of more than one line. The later declaration always wins
            unless the mode is FAIL. Defaults to ErrorMode.IGNORE.
        encoding: Text encoding used to read declaration files.
            Defaults to "utf-8".
        report_cycles: If True, cycles found in the graph are recorded as
            INFO warnings on the result. Defaults to True.

    Example:
        >>> config = ResolverConfig(on_redeclaration=ErrorMode.WARN)
        >>> config.encoding
        'utf-8'
    """

    on_redeclaration: ErrorMode = ErrorMode.IGNORE
    encoding: str = "utf-8"
    report_cycles: bool = True

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.on_redeclaration, ErrorMode):
            raise TypeError("on_redeclaration must be an ErrorMode instance")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise TypeError("encoding must be a non-empty string")
        if not isinstance(self.report_cycles, bool):
            raise TypeError("report_cycles must be a boolean")

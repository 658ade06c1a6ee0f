"""
Custom exception classes for dependency resolution.

This module defines all custom exceptions used throughout the dependency
resolver package. Each exception corresponds to one fatal failure scenario
while reading or parsing a declaration file.
"""

from typing import Optional


class DependencyError(Exception):
    """Base exception class for all dependency resolution errors.

    This exception serves as the base class for all custom exceptions in the
    dependency resolver package. It can be used to catch any failure raised
    while reading, parsing or resolving declarations.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a DependencyError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class InputFileNotFoundError(DependencyError):
    """Exception raised when the declaration file cannot be read.

    Raised both for paths that do not exist and for paths that exist but
    cannot be opened or decoded (directories, permission problems, bad
    encoding).

    Attributes:
        message: Error message.
        path: The path that could not be read.
    """

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = str(path)
        self.reason = reason

        message = f"File not found: {self.path}"
        if reason:
            message = f"{message} ({reason})"

        super().__init__(message)


class EmptyInputError(DependencyError):
    """Exception raised when the input holds no declarations.

    An empty file, or a file made only of blank and whitespace-only lines,
    has nothing to resolve.
    """

    def __init__(
        self, message: str = "No valid dependency declarations found"
    ) -> None:
        super().__init__(message)


class InvalidLineFormatError(DependencyError):
    """Exception raised when a line is not a dependency declaration.

    A valid line has the shape ``<library> depends on <dep> [<dep> ...]``.
    Parsing stops at the first offending line.

    Attributes:
        message: Error message naming the offending line.
        line: Raw text of the offending line.
        line_number: 1-based line number, if known.
    """

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        """Initialize an InvalidLineFormatError.

        Args:
            line: Raw text of the line that failed to parse.
            line_number: Optional 1-based position of the line in the input.
        """
        self.line = line
        self.line_number = line_number
        super().__init__(f"Invalid line format: {line}")


class DuplicateDeclarationError(DependencyError):
    """Exception raised when a library is declared twice in strict mode.

    Only raised when ``ResolverConfig.on_redeclaration`` is
    ``ErrorMode.FAIL``; the default policy overwrites silently.

    Attributes:
        library: Name of the redeclared library.
        line_number: Line of the second declaration, if known.
    """

    def __init__(self, library: str, line_number: Optional[int] = None) -> None:
        self.library = library
        self.line_number = line_number

        message = f"Library '{library}' is declared more than once"
        if line_number is not None:
            message = f"{message} (line {line_number})"

        super().__init__(message)

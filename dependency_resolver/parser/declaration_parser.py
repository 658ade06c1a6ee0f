"""
Declaration parser for dependency files.

This module defines the DeclarationParser class, which turns text made of
"<library> depends on <dep> [<dep> ...]" lines into a DependencyGraph.
"""

import re
from pathlib import Path
from typing import Iterator, Optional, Union

from dependency_resolver.exceptions import (
    DuplicateDeclarationError,
    EmptyInputError,
    InputFileNotFoundError,
    InvalidLineFormatError,
)
from dependency_resolver.graph.dependency_graph import DependencyGraph
from dependency_resolver.models.config import ErrorMode, ResolverConfig
from dependency_resolver.models.declaration import Declaration
from dependency_resolver.utils.warnings import WarningCollector

# The greedy library group makes the split happen at the last "depends on".
DECLARATION_PATTERN = re.compile(
    r"^\s*(?P<library>\S.*)\s+depends\s+on\s+(?P<dependencies>\S.*?)\s*$",
    re.IGNORECASE,
)


class DeclarationParser:
    """Parser for dependency declaration files.

    Responsibilities:
    1. Match each non-blank line against the declaration pattern
    2. Build a DependencyGraph, keeping first-seen library order
    3. Apply the configured redeclaration policy

    Parsing is all-or-nothing: the first invalid line aborts the whole
    parse and no graph is returned.

    Usage:
        parser = DeclarationParser()
        graph = parser.parse_text("X depends on Y R\\nY depends on Z")
        graph.libraries  # ['X', 'Y']
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        warnings: Optional[WarningCollector] = None,
    ) -> None:
        """Initialize a DeclarationParser.

        Args:
            config: Resolver configuration (defaults to ResolverConfig()).
            warnings: Collector for non-fatal findings. A new one is created
                if not given.
        """
        self.config = config or ResolverConfig()
        self.warnings = warnings if warnings is not None else WarningCollector()

    def parse_line(
        self, line: str, line_number: Optional[int] = None
    ) -> Declaration:
        """Parse a single declaration line.

        Args:
            line: Raw line text.
            line_number: Optional 1-based line number, for diagnostics.

        Returns:
            Declaration for the line.

        Raises:
            InvalidLineFormatError: If the line is not a declaration.
        """
        match = DECLARATION_PATTERN.match(line)
        if not match:
            raise InvalidLineFormatError(line, line_number)

        library = match.group("library").strip()
        dependencies = tuple(dict.fromkeys(match.group("dependencies").split()))

        return Declaration(
            library=library,
            dependencies=dependencies,
            line_number=line_number,
            raw=line,
        )

    def iter_declarations(self, text: str) -> Iterator[Declaration]:
        """Yield a Declaration for every non-blank line of text.

        Raises:
            InvalidLineFormatError: On the first line that does not match.
        """
        for line_number, line in enumerate(text.splitlines(), 1):
            if not line.strip():
                continue
            yield self.parse_line(line, line_number)

    def parse_text(self, text: str) -> DependencyGraph:
        """Parse declaration text into a DependencyGraph.

        Args:
            text: Whole input, one declaration per line. Blank lines are
                skipped.

        Returns:
            DependencyGraph holding every declaration.

        Raises:
            EmptyInputError: If text has no non-blank line.
            InvalidLineFormatError: If any line fails to parse.
            DuplicateDeclarationError: If a library is redeclared and the
                redeclaration policy is ErrorMode.FAIL.
        """
        if not text or not text.strip():
            raise EmptyInputError()

        graph = DependencyGraph()
        for declaration in self.iter_declarations(text):
            self._add(graph, declaration)

        return graph

    def parse_file(self, path: Union[str, Path]) -> DependencyGraph:
        """Read and parse a declaration file.

        Args:
            path: Path to the input file.

        Returns:
            DependencyGraph holding every declaration.

        Raises:
            InputFileNotFoundError: If the file is missing or unreadable.
            EmptyInputError: If the file has no non-blank line.
            InvalidLineFormatError: If any line fails to parse.
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self.config.encoding)
        except FileNotFoundError as e:
            raise InputFileNotFoundError(str(path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileNotFoundError(str(path), reason=str(e)) from e

        return self.parse_text(text)

    def _add(self, graph: DependencyGraph, declaration: Declaration) -> None:
        if graph.is_declared(declaration.library):
            mode = self.config.on_redeclaration
            if mode == ErrorMode.FAIL:
                raise DuplicateDeclarationError(
                    declaration.library, declaration.line_number
                )
            if mode == ErrorMode.WARN:
                self.warnings.add_redeclaration_warning(
                    declaration.library,
                    declaration.line_number,
                    context=declaration.raw,
                )

        graph.add_declaration(declaration)

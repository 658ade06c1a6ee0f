"""
Command-line interface for the dependency resolver.

This module provides the ``dependency-resolver`` command, which reads a
declaration file and prints the transitive dependencies of every declared
library, with optional JSON/table output and reverse lookups.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from colorama import Fore, Style, init

from dependency_resolver import (
    DependencyAnalyzer,
    ErrorMode,
    ResolutionResult,
    ResolverConfig,
)
from dependency_resolver.exceptions import (
    DependencyError,
    DuplicateDeclarationError,
    EmptyInputError,
    InputFileNotFoundError,
    InvalidLineFormatError,
)

init(autoreset=True)
HAS_COLOR = True

ERROR_HINTS = {
    InputFileNotFoundError: "Make sure the file exists and the path is correct",
    InvalidLineFormatError: (
        'Each line should follow the format: '
        '"<library> depends on <dependencies>"'
    ),
    EmptyInputError: (
        "File should contain at least one valid dependency declaration"
    ),
    DuplicateDeclarationError: (
        "Merge the declarations into one line, or run without --strict"
    ),
}

REPORT_RULE = "-" * 24


def print_success(msg: str) -> None:
    """Print success message."""
    try:
        if HAS_COLOR:
            print(f"{Fore.GREEN}✓ {msg}{Style.RESET_ALL}")
        else:
            print(f"[OK] {msg}")
    except UnicodeEncodeError:
        # Fallback for consoles without unicode support
        print(f"[OK] {msg}")


def print_error(msg: str) -> None:
    """Print error message."""
    try:
        if HAS_COLOR:
            print(f"{Fore.RED}✗ {msg}{Style.RESET_ALL}", file=sys.stderr)
        else:
            print(f"[ERROR] {msg}", file=sys.stderr)
    except UnicodeEncodeError:
        print(f"[ERROR] {msg}", file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    try:
        if HAS_COLOR:
            print(f"{Fore.YELLOW}⚠ {msg}{Style.RESET_ALL}", file=sys.stderr)
        else:
            print(f"[WARN] {msg}", file=sys.stderr)
    except UnicodeEncodeError:
        print(f"[WARN] {msg}", file=sys.stderr)


def print_info(msg: str) -> None:
    """Print info message."""
    if HAS_COLOR:
        print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}")
    else:
        print(msg)


def print_hint(error: DependencyError) -> None:
    """Print the hint matching an error kind, if there is one."""
    hint = ERROR_HINTS.get(type(error))
    if hint:
        if HAS_COLOR:
            print(f"{Fore.YELLOW}Tip: {hint}{Style.RESET_ALL}", file=sys.stderr)
        else:
            print(f"Tip: {hint}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dependency-resolver",
        description="Transitive library dependency resolver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format (one declaration per line):
  A depends on B C
  B depends on C E

Examples:
  # Resolve all declared libraries
  %(prog)s deps.txt

  # Only the report lines
  %(prog)s deps.txt --quiet

  # Which libraries pull in E?
  %(prog)s deps.txt --dependents E

  # Export the full graph
  %(prog)s deps.txt --export graph.json
        """,
    )

    parser.add_argument("input_file", help="Dependency declaration file")

    query_group = parser.add_argument_group("Query Options")
    query_group.add_argument(
        "--dependents",
        "-d",
        metavar="LIBRARY",
        help="List declared libraries that depend on LIBRARY",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["text", "json", "table"],
        default="text",
        help="Output format (default: text)",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Print only the resolved dependencies",
    )
    output_group.add_argument(
        "--export", "-o", metavar="FILE", help="Export full result to a JSON file"
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )

    config_group = parser.add_argument_group("Configuration")
    redeclare = config_group.add_mutually_exclusive_group()
    redeclare.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a library is declared more than once",
    )
    redeclare.add_argument(
        "--warn-redeclared",
        action="store_true",
        help="Warn when a library is declared more than once",
    )
    config_group.add_argument(
        "--no-warnings", action="store_true", help="Suppress warnings"
    )
    config_group.add_argument(
        "--encoding", default="utf-8", help="Input file encoding (default: utf-8)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        dependency-resolver deps.txt
        dependency-resolver deps.txt --format json
        dependency-resolver deps.txt --dependents E
        dependency-resolver deps.txt --strict
    """
    args = build_parser().parse_args(argv)

    if args.no_color:
        global HAS_COLOR
        HAS_COLOR = False

    verbose = not args.quiet and args.format != "json"

    if args.strict:
        on_redeclaration = ErrorMode.FAIL
    elif args.warn_redeclared:
        on_redeclaration = ErrorMode.WARN
    else:
        on_redeclaration = ErrorMode.IGNORE

    try:
        config = ResolverConfig(
            on_redeclaration=on_redeclaration, encoding=args.encoding
        )

        if verbose:
            print_info("Starting dependency resolution process...")
            print_info(f"Reading input file: {args.input_file}")

        result = DependencyAnalyzer(config=config).analyze_file(args.input_file)

        if verbose:
            print_success("Successfully parsed input file")

        if args.dependents:
            handle_dependents(result, args.dependents)
        else:
            handle_report(result, args.format, verbose)

        if args.export:
            handle_export(result, args.export, verbose)

        if not args.no_warnings:
            show_warnings(result)

        if verbose:
            print_success("Process completed successfully")

    except DependencyError as e:
        print_error(f"Error: {e}")
        print_hint(e)
        sys.exit(1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


def handle_report(result: ResolutionResult, format: str, verbose: bool) -> None:
    """Print the resolved dependencies."""
    if format == "json":
        print(result.to_json(indent=2))
        return

    body = result.to_table() if format == "table" else result.to_text()

    if verbose:
        print_info("Generating dependency tree...")
        print_info("\nResolved Dependencies:")
        print(REPORT_RULE)
        print(body)
        print(REPORT_RULE)
    else:
        print(body)


def handle_dependents(result: ResolutionResult, library: str) -> None:
    """Handle --dependents command."""
    dependents = result.dependents(library)

    if not dependents:
        print_warning(f"No declared library depends on {library}")
        return

    for name in dependents:
        print(name)


def handle_export(result: ResolutionResult, output_file: str, verbose: bool) -> None:
    """Export the full result as JSON."""
    output_path = Path(output_file)
    output_path.write_text(
        json.dumps(result.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    if verbose:
        print_success(f"Exported to {output_path}")


def show_warnings(result: ResolutionResult) -> None:
    """Show collected warnings."""
    if not result.warnings:
        return

    print_warning(f"{len(result.warnings)} warning(s):")
    for i, warning in enumerate(result.warnings, 1):
        print(f"  {i}. [{warning.level}] {warning.message}", file=sys.stderr)


if __name__ == "__main__":
    main()

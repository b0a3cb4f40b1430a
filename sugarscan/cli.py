"""
SugarScan Command-Line Interface

This module provides the CLI entry point for SugarScan. It resolves the
scan target, runs the reader and prints one descriptor per factory method.

Usage:
    sugarscan mylib.matchers --target python
    sugarscan mylib.core:CoreMatchers --target gwt --format json
    sugarscan mylib.matchers --marker mylib.factory:Factory --matcher mylib:Matcher

Exit codes:
    0  success
    1  bad scan target (not importable, not a class or module)
    2  matcher core could not be loaded (marker/matcher/accessor missing)
"""

import argparse
import json
import sys
from typing import Optional

from sugarscan import __version__
from sugarscan.capabilities import CapabilityError, CapabilityResolver
from sugarscan.config import DEFAULT_MARKER_TYPE, DEFAULT_MATCHER_TYPE, ScanOptions
from sugarscan.readers import create_reader_registry


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="sugarscan",
        description=(
            "SugarScan: factory method metadata extraction.\n\n"
            "Scans a class or module for marked matcher factory methods and "
            "prints a normalized description of each, ready for sugar generation."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  sugarscan mylib.matchers -t python         # Scan a module\n"
            "  sugarscan mylib.core:Core -t gwt -f json   # Scan a class, JSON output\n"
            "\n"
            "Environment:\n"
            "  SUGARSCAN_MARKER_TYPE   default for --marker\n"
            "  SUGARSCAN_MATCHER_TYPE  default for --matcher\n"
            "\n"
            "Capabilities:\n"
            "  The built-in defaults name hamcrest.core.factory:Factory and\n"
            "  hamcrest.core.matcher:Matcher. PyHamcrest ships no factory marker,\n"
            "  so set --marker (or SUGARSCAN_MARKER_TYPE) to your library's marker\n"
            "  type; an unresolvable marker or matcher exits with code 2.\n"
        ),
    )

    # Positional argument: what to scan
    parser.add_argument(
        "type",
        type=str,
        help="Class or module to scan ('pkg.module:Class' or 'pkg.module')",
    )

    parser.add_argument(
        "-t", "--target",
        type=str,
        default="",
        help="Exclusion target id; factories excluding it are skipped",
    )

    parser.add_argument(
        "-f", "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    # Capability names
    parser.add_argument(
        "--marker",
        type=str,
        default=None,
        help=f"Qualified name of the factory marker type (default: {DEFAULT_MARKER_TYPE})",
    )

    parser.add_argument(
        "--matcher",
        type=str,
        default=None,
        help=f"Qualified name of the matcher capability type (default: {DEFAULT_MATCHER_TYPE})",
    )

    # Verbosity
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed progress information",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def log(message: str, quiet: bool = False) -> None:
    """Print a progress/status message to stderr."""
    if not quiet:
        print(f"[sugarscan] {message}", file=sys.stderr)


def log_verbose(message: str, verbose: bool, quiet: bool) -> None:
    """Print a message only in verbose mode."""
    if verbose and not quiet:
        print(f"  {message}", file=sys.stderr)


def run_scan(
    type_name: str,
    target: str,
    options: ScanOptions,
    output_format: str = "text",
    verbose: bool = False,
    quiet: bool = False,
) -> int:
    """
    Resolve the scan target, read its factory methods and print them.

    Args:
        type_name: Qualified name of the class or module to scan
        target: Exclusion target id
        options: Capability names
        output_format: "text" (one signature per line) or "json"
        verbose: If True, show detailed progress
        quiet: If True, suppress non-error output

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    resolver = CapabilityResolver()

    try:
        scan_target = resolver.resolve(type_name)
        reader = create_reader_registry().create_reader(
            scan_target, target, options, resolver
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log(f"Scanning {type_name} ({reader.name} reader)...", quiet=quiet)
    log_verbose(f"Marker type: {options.marker_type}", verbose, quiet)
    log_verbose(f"Matcher type: {options.matcher_type}", verbose, quiet)
    log_verbose(f"Exclusion target: {target or '(none)'}", verbose, quiet)

    try:
        methods = list(reader)
    except CapabilityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for warning in reader.get_warnings():
        log(f"Warning: {warning}", quiet=quiet)

    if output_format == "json":
        print(json.dumps([m.to_dict() for m in methods], indent=2))
    else:
        for method in methods:
            print(f"{method.declaring_type_name}: {method.signature()}")

    log(f"Found {len(methods)} factory method(s)", quiet=quiet)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    options = ScanOptions.from_env(
        marker_type=args.marker,
        matcher_type=args.matcher,
    )

    return run_scan(
        type_name=args.type,
        target=args.target,
        options=options,
        output_format=args.format,
        verbose=args.verbose,
        quiet=args.quiet,
    )


if __name__ == "__main__":
    sys.exit(main())

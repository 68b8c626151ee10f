"""
objscan CLI — Read-Only Inspector for JSON Objects.

Commands:
    objscan keys <file>     — Keys in canonical order, one per line
    objscan entries <file>  — "key: value" lines in canonical order
    objscan count <file>    — Number of enumerated entries

<file> is a path to a JSON document whose top level is an object, or "-"
to read from stdin. Key order in the document is taken as creation order.

The CLI never writes to its input.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional

from ..operations import for_each, reduce
from ..ordering import ordered_keys


# =============================================================================
# INPUT
# =============================================================================

class DocumentError(Exception):
    """Raised when the input cannot be used as a container."""
    pass


def load_document(path: str) -> dict[str, Any]:
    """
    Read a JSON object from a path, or from stdin when path is "-".

    Raises:
        DocumentError: If the file is unreadable, not UTF-8, not JSON, or not an object
    """
    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            with open(path, "r", encoding="utf-8") as fh:
                text = fh.read()
    except UnicodeDecodeError as e:
        raise DocumentError(f"Cannot decode {path} as UTF-8: {e.reason} at byte {e.start}") from e
    except OSError as e:
        raise DocumentError(f"Cannot read {path}: {e.strerror or e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e

    if not isinstance(document, dict):
        raise DocumentError(
            f"Top level of {path} is {type(document).__name__}, expected an object"
        )
    return document


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_entry(key: str, value: Any) -> str:
    """Format a single entry for display."""
    return f"{key}: {json.dumps(value, ensure_ascii=False)}"


def report_error(error: DocumentError) -> int:
    print("ERROR: Cannot inspect document")
    print(f"Reason: {error}")
    return 1


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_keys(args: argparse.Namespace) -> int:
    """Print keys in canonical order."""
    try:
        document = load_document(args.file)
    except DocumentError as e:
        return report_error(e)

    for key in ordered_keys(document):
        print(key)
    return 0


def cmd_entries(args: argparse.Namespace) -> int:
    """Print key/value pairs in canonical order."""
    try:
        document = load_document(args.file)
    except DocumentError as e:
        return report_error(e)

    for_each(document, lambda value, key: print(format_entry(key, value)))
    return 0


def cmd_count(args: argparse.Namespace) -> int:
    """Print the number of enumerated entries."""
    try:
        document = load_document(args.file)
    except DocumentError as e:
        return report_error(e)

    print(reduce(document, lambda total: total + 1, 0))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="objscan",
        description="objscan — Canonical key order for JSON objects",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    commands = [
        ("keys", "Print keys in canonical order", cmd_keys),
        ("entries", "Print key/value pairs in canonical order", cmd_entries),
        ("count", "Print the number of enumerated entries", cmd_count),
    ]
    for name, help_text, handler in commands:
        command_parser = subparsers.add_parser(name, help=help_text)
        command_parser.add_argument(
            "file",
            help='JSON file to inspect, or "-" for stdin',
        )
        command_parser.set_defaults(func=handler)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
codesmells CLI

Thin wrapper over the analysis engine.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from codesmells.config import DEFAULT_WHITELISTS
from codesmells.orchestrator import analyze_project
from codesmells.report import format_json, format_matrix, format_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codesmells",
        description="Detect structural code smells in C# source files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  codesmells analyze .
  codesmells analyze src/Program.cs --format json
  codesmells analyze /path/to/project --allow-number 2 --allow-string " "
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log discovered and analyzed files to stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="{analyze}",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze a C# file or project directory",
    )
    analyze_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="File or directory to analyze (default: current directory)",
    )
    analyze_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    analyze_parser.add_argument(
        "--allow-number",
        type=float,
        action="append",
        default=[],
        metavar="N",
        help="Whitelist an extra numeric literal (repeatable)",
    )
    analyze_parser.add_argument(
        "--allow-string",
        action="append",
        default=[],
        metavar="S",
        help="Whitelist an extra string literal (repeatable)",
    )
    analyze_parser.add_argument(
        "--allow-char",
        action="append",
        default=[],
        metavar="C",
        help="Whitelist an extra character literal (repeatable)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "analyze":
        path = Path(args.path).resolve()

        if not path.exists():
            print(f"Error: Path does not exist: {path}", file=sys.stderr)
            return 1

        try:
            whitelists = DEFAULT_WHITELISTS.extended(
                numbers=args.allow_number,
                strings=args.allow_string,
                characters=args.allow_char,
            )
            records = analyze_project(path, whitelists)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception:
            logging.getLogger(__name__).debug("Analysis failed", exc_info=True)
            print("Internal error while analyzing sources.", file=sys.stderr)
            print("Run with --verbose for details.", file=sys.stderr)
            return 2

        if args.format == "json":
            print(format_json(records))
            return 0

        print(f"Analyzed path: {path}")
        print(format_text(records))

        if records:
            print()
            print(format_matrix(records))

        return 0

    # This should never happen because argparse enforces commands
    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())

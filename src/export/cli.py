#!/usr/bin/env python3
"""CLI interface for the export module."""

import argparse
from pathlib import Path

from common.logger import console, error, get_logger, setup_logging

from .errors import ExportError
from .factory import FORMATTERS, get_formatter
from .loader import load_contributions
from .models import FormatterOptions

logger = get_logger(__name__)


def cmd_export(args):
    """Load contributions and write them with the chosen formatter.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        contributions = load_contributions(args.input)
        formatter = get_formatter(args.format)
        result = formatter.format(
            contributions,
            FormatterOptions(anonymize=args.anonymize, with_links=args.with_links),
        )
    except (ExportError, ValueError, FileNotFoundError) as e:
        error(str(e))
        return 1

    console.print(result.content, markup=False, highlight=False, soft_wrap=True)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export contribution records as a report or as git commits"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON file with contribution records",
    )
    parser.add_argument(
        "--format",
        choices=sorted(FORMATTERS),
        default="console",
        help="Output format (default: console)",
    )
    parser.add_argument(
        "--anonymize",
        action="store_true",
        help="Replace repository names and messages with deterministic hashes",
    )
    parser.add_argument(
        "--with-links",
        action="store_true",
        help="Include contribution URLs in console output",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file",
    )
    parser.set_defaults(func=cmd_export)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())

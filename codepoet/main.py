"""Command-line entry point for codepoet."""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .codegen.cli_integration import create_info_subparser, create_render_subparser
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="codepoet",
        description="Generate Swift source files from JSON model descriptions",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")
    create_render_subparser(subparsers)
    create_info_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected subcommand.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if getattr(args, "verbose", False) else args.log_level
    setup_logging(getattr(logging, level))

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

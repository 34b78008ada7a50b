"""Command-line entry point for graphql-codegen."""

from __future__ import annotations

import argparse
from typing import Sequence

from . import __version__
from .codegen.cli_integration import add_codegen_args, handle_codegen_command
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``graphql-codegen`` command."""
    parser = argparse.ArgumentParser(
        prog="graphql-codegen",
        description="Generate resolver code from a GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphql-codegen schema.graphql --output-dir ./resolvers
  graphql-codegen schema.graphql --config codegen.json --package api
  graphql-codegen --url https://example.com/schema.graphql
  graphql-codegen --list-templates
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    add_codegen_args(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``).

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger.debug("Parsed arguments: %s", args)

    return handle_codegen_command(args)

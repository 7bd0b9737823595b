"""Main CLI entry point for gdconfig.

Provides commands: dump, actions
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("gdconfig.cli")

# Trigger section registration by importing parsers package
import gdconfig.parsers

from gdconfig.models.sections import Dialect
from gdconfig.parsers.registry import SectionRegistry
from gdconfig.cli.dump import dump_command
from gdconfig.cli.actions import actions_command


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="gdconfig - project and extension descriptor parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional parser configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Dump command
    dump_parser = subparsers.add_parser(
        "dump",
        help="Parse a descriptor and print the parsed document",
    )
    dump_parser.add_argument(
        "descriptor",
        help="Path to project.godot or a .gdextension file",
    )
    dump_parser.add_argument(
        "-d",
        "--dialect",
        choices=[d.value for d in Dialect],
        help="Descriptor dialect (default: guessed from the file name)",
    )
    dump_parser.add_argument(
        "-f",
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json, use text to re-render extension sections)",
    )
    dump_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: stdout)",
    )

    # Actions command
    actions_parser = subparsers.add_parser(
        "actions",
        help="List input actions and their triggers",
    )
    actions_parser.add_argument(
        "descriptor",
        help="Path to project.godot",
    )
    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)

    sections = SectionRegistry.get_instance().list_sections()
    logger.debug("Loaded %d section parser(s): %s", len(sections), ", ".join(sections))

    # Dispatch to subcommand
    if args.command == "dump":
        return dump_command(args)
    elif args.command == "actions":
        return actions_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

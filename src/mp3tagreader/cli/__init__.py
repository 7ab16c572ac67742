"""Command-line interface for mp3tagreader.

This package provides the 'mp3tagreader' command-line tool:
    -v FILE: View the tag of an MP3 file
    -w FILE: Write the placeholder tag to an MP3 file
    -e FIELD FILE VALUE: Edit one field of an existing tag

Modules:
    commands/: Command implementations (view, write, edit)
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from ..constants import FIELDS
from .utils import setup_logging, print_error
from .commands import (
    cmd_view,
    cmd_write,
    cmd_edit,
)

__all__ = [
    "main",
    "build_parser",
    "cmd_view",
    "cmd_write",
    "cmd_edit",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


class HelpOnErrorParser(argparse.ArgumentParser):
    """Parser that shows the help text instead of failing on bad usage."""

    def error(self, message):
        self.print_help()
        self.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = HelpOnErrorParser(
        prog="mp3tagreader",
        usage="mp3tagreader [options] filename",
        description="mp3tagreader - View, write and edit ID3v2 tags in MP3 files",
        epilog=f"Editable fields: {', '.join(FIELDS)}",
        formatter_class=RichRawHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )
    parser.add_argument("-c", "--config", help="Path to configuration file")

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        "-v",
        "--view",
        metavar="FILE",
        help="View tags in an MP3 file",
    )
    actions.add_argument(
        "-w",
        "--write",
        metavar="FILE",
        help="Write placeholder tags to an MP3 file",
    )
    actions.add_argument(
        "-e",
        "--edit",
        nargs=3,
        metavar=("FIELD", "FILE", "VALUE"),
        help="Edit a specific tag in an MP3 file",
    )
    return parser


def main(argv=None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    # Show help if no arguments are provided
    if not argv:
        parser.print_help()
        sys.exit(1)

    args = parser.parse_args(argv)

    if args.view is not None:
        command = cmd_view
    elif args.write is not None:
        command = cmd_write
    elif args.edit is not None:
        command = cmd_edit
    else:
        parser.print_help()
        return

    config = Config(args.config)

    # Logging setup
    setup_logging(args.log_level or config.get_log_level())

    # Execute command
    try:
        command(args, config)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        print_error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""View command - Display the tag of an MP3 file."""

import argparse
import logging

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...config import Config
from ...errors import Id3Error
from ...tagging import TagRecord, read_tags
from ...utils import display_text
from ..utils import print_error

NOT_AVAILABLE = "N/A"


def build_tag_table(record: TagRecord) -> Table:
    """Return a two-column table of the version and the six fields."""
    table = Table(title="ID3 Tag", show_header=False)
    table.add_column("Field", style="cyan", width=10)
    table.add_column("Value", style="magenta")

    table.add_row("Version", Text(record.version or NOT_AVAILABLE))
    for name, value in record.fields():
        table.add_row(name.capitalize(), Text(display_text(value) if value is not None else NOT_AVAILABLE))
    return table


def cmd_view(args: argparse.Namespace, config: Config) -> None:
    """Read and display the tag of ``args.view``.

    Failures are reported on stderr; the command itself always succeeds.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration
    """
    console = Console()

    logging.info("Reading tags from: %s", args.view)
    try:
        record = read_tags(args.view)
    except Id3Error as e:
        print_error(e)
        return

    console.print(build_tag_table(record))

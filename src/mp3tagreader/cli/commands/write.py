"""Write command - Write the placeholder tag to an MP3 file."""

import argparse
import logging

from rich.console import Console

from ...config import Config
from ...errors import Id3Error
from ...tagging import write_tags
from ..utils import print_error


def cmd_write(args: argparse.Namespace, config: Config) -> None:
    """Write the configured placeholder tag to ``args.write``.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration
    """
    console = Console()
    record = config.get_placeholder_record()

    logging.info("Writing placeholder tags to: %s", args.write)
    try:
        write_tags(
            args.write,
            record,
            temp_dir=config.get_temp_dir(),
            chunk_size=config.get_chunk_size(),
        )
    except Id3Error as e:
        print_error(e)
        print_error("Failed to write tags.")
        return

    console.print("Tags written successfully.", style="green")

"""Edit command - Change one field of an existing tag."""

import argparse
import logging

from rich.console import Console

from ...config import Config
from ...errors import Id3Error
from ...tagging import edit_field
from ..utils import print_error


def cmd_edit(args: argparse.Namespace, config: Config) -> None:
    """Set one field of the tag in an MP3 file.

    ``args.edit`` holds (field, file, value) in command-line order.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration
    """
    console = Console()
    field_name, path, value = args.edit

    logging.info("Editing %s of %s", field_name, path)
    try:
        edit_field(
            path,
            field_name,
            value,
            temp_dir=config.get_temp_dir(),
            chunk_size=config.get_chunk_size(),
        )
    except Id3Error as e:
        print_error(e)
        print_error("Failed to edit tag.")
        return

    console.print("Tag edited successfully.", style="green")

"""CLI command implementations.

Each module in this package implements one mp3tagreader action:
    view.py: Read and display the tag of a file
    write.py: Write the placeholder tag to a file
    edit.py: Change a single field of an existing tag
"""

from .view import cmd_view
from .write import cmd_write
from .edit import cmd_edit

__all__ = [
    "cmd_view",
    "cmd_write",
    "cmd_edit",
]

"""ID3v2 tag codec.

Modules:
    record.py: TagRecord, the in-memory tag
    header.py: TagHeader, the 10-byte tag header
    frame.py: Frame, one length-prefixed tag frame
    validator.py: File name check gating reads and writes
    reader.py: Parse a file into a TagRecord
    writer.py: Splice a TagRecord into a file
    editor.py: Read, change one field, write back
"""

from .record import TagRecord
from .header import TagHeader
from .frame import Frame
from .validator import is_mp3_file, ensure_mp3_file
from .reader import read_tags, read_tags_from_file
from .writer import write_tags, render_tag, build_frames
from .editor import edit_field

__all__ = [
    "TagRecord",
    "TagHeader",
    "Frame",
    "is_mp3_file",
    "ensure_mp3_file",
    "read_tags",
    "read_tags_from_file",
    "write_tags",
    "render_tag",
    "build_frames",
    "edit_field",
]

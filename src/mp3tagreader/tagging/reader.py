"""Parse the ID3v2 tag at the start of an MP3 file into a TagRecord."""

import logging
import os

from ..constants import FRAME_TO_FIELD
from ..errors import AllocationFailureError, TagIOError
from .frame import Frame
from .header import TagHeader
from .record import TagRecord
from .validator import ensure_mp3_file

logger = logging.getLogger(__name__)


def read_tags_from_file(f) -> TagRecord:
    """Return the TagRecord stored in an open binary file object.

    The file position must be at the start of the tag. Frames are read
    until the declared tag size is used up, padding is reached, or the
    data runs out; a damaged tail is tolerated and whatever was parsed so
    far is returned. When a frame id occurs more than once, the last
    occurrence wins.

    Raises:
        TruncatedHeaderError: If fewer than 10 header bytes are available
        NoTagFoundError: If the data does not start with ``ID3``
        AllocationFailureError: If memory runs out while reading frames
    """
    header = TagHeader.from_file(f)
    record = TagRecord(version=header.version_string)
    logger.debug("Found %s tag, %d bytes of frames", record.version, header.size)

    file_size = _stream_size(f)
    tag_end = f.tell() + header.size
    try:
        while f.tell() < tag_end:
            frame = Frame.from_file(f, file_size - f.tell())
            if frame is None:
                break

            field = FRAME_TO_FIELD.get(frame.frame_id)
            if field is None:
                logger.debug("Skipping unknown frame %r", frame.frame_id)
                continue

            if getattr(record, field) is not None:
                logger.debug("Frame %s repeated, keeping the later value", frame.frame_id)
            record.set_field(field, frame.text)
    except MemoryError as e:
        raise AllocationFailureError("Memory allocation failed.") from e

    return record


def read_tags(path) -> TagRecord:
    """Return the TagRecord of an MP3 file.

    Raises:
        NotAnMp3FileError: If the file name does not end with ``.mp3``
        TagIOError: If the file cannot be opened or read
        TruncatedHeaderError: If the file is shorter than a tag header
        NoTagFoundError: If the file has no ID3v2 tag
    """
    ensure_mp3_file(path)

    try:
        f = open(path, "rb")
    except OSError as e:
        raise TagIOError(f"Cannot open file for reading: {path}") from e

    with f:
        try:
            return read_tags_from_file(f)
        except OSError as e:
            raise TagIOError(f"Failed to read {path}: {e}") from e


def _stream_size(f) -> int:
    position = f.tell()
    size = f.seek(0, os.SEEK_END)
    f.seek(position)
    return size

"""Serialize a TagRecord and splice it into an MP3 file.

The file is rewritten through a temporary file: header, new frames, then
the audio data that followed the old tag. The temporary file replaces the
original only once it has been written completely.
"""

import logging
import os
import shutil
import tempfile
from typing import List, Optional

from ..constants import COPY_CHUNK_SIZE, FIELD_TO_FRAME, HEADER_SIZE
from ..errors import NoTagFoundError, TagEncodeError, TagIOError, TruncatedHeaderError
from .frame import Frame
from .header import TagHeader
from .record import TagRecord
from .validator import ensure_mp3_file

logger = logging.getLogger(__name__)


def build_frames(record: TagRecord) -> List[Frame]:
    """Return one text frame per field that holds a value, in write order."""
    return [
        Frame.from_text(FIELD_TO_FRAME[name], value)
        for name, value in record.fields()
        if value is not None
    ]


def render_tag(record: TagRecord, header: Optional[TagHeader] = None) -> bytes:
    """Return the complete tag block (header and frames) for a record.

    The header's size field is set from the frames actually emitted. If no
    header is given, one is derived from ``record.version``.
    """
    if header is None:
        header = TagHeader.for_version(record.version)
    frame_data = b"".join(frame.to_bytes() for frame in build_frames(record))
    header.size = len(frame_data)
    return header.to_bytes() + frame_data


def _existing_header(f, record):
    """Return (header, offset of the audio data) for the original file.

    A file without a tag gets a fresh header and all of it is audio.
    """
    data = f.read(HEADER_SIZE)
    try:
        old = TagHeader.from_bytes(data)
    except (TruncatedHeaderError, NoTagFoundError):
        logger.debug("No existing tag, creating a %s header", record.version or "default")
        return TagHeader.for_version(record.version), 0
    return TagHeader(old.major, old.minor, old.flags), old.tag_end


def _open_temp(path, temp_path, temp_dir):
    if temp_path is not None:
        return open(temp_path, "wb")
    directory = temp_dir or os.path.dirname(os.path.abspath(path))
    return tempfile.NamedTemporaryFile(
        mode="wb",
        dir=directory,
        prefix=f".{os.path.basename(path)}.",
        suffix=".tmp",
        delete=False,
    )


def _discard(temp_name):
    try:
        os.unlink(temp_name)
    except OSError as e:
        logger.warning("Failed to remove temporary file %s: %s", temp_name, e)


def write_tags(
    path,
    record: TagRecord,
    temp_path=None,
    temp_dir=None,
    chunk_size: int = COPY_CHUNK_SIZE,
) -> None:
    """Replace the ID3v2 tag of an MP3 file with the contents of ``record``.

    Args:
        path: MP3 file to rewrite
        record: Tag values; fields that are None are not written
        temp_path: Temporary file to build the new file in. If None, a
            uniquely named file is created next to ``path`` (or in
            ``temp_dir``).
        temp_dir: Directory for the generated temporary file
        chunk_size: Buffer size used when copying the audio data

    Raises:
        NotAnMp3FileError: If the file name does not end with ``.mp3``
        TagIOError: If any file operation fails. If the final replace
            fails, the temporary file is left in place and its path is
            available as ``temp_path`` on the error.
        TagEncodeError: If a value cannot be encoded or the tag is too large
    """
    ensure_mp3_file(path)

    try:
        original = open(path, "rb")
    except OSError as e:
        raise TagIOError(f"Cannot open original file for reading: {path}") from e

    with original:
        try:
            header, audio_offset = _existing_header(original, record)
        except OSError as e:
            raise TagIOError(f"Failed to read ID3 header: {path}") from e
        try:
            tag = render_tag(record, header)
        except ValueError as e:
            raise TagEncodeError(f"Cannot encode tag for {path}: {e}") from e

        try:
            temp = _open_temp(path, temp_path, temp_dir)
        except OSError as e:
            raise TagIOError("Cannot open temporary file for writing.") from e

        temp_name = temp.name
        try:
            with temp:
                temp.write(tag)
                original.seek(audio_offset)
                shutil.copyfileobj(original, temp, chunk_size)
        except OSError as e:
            _discard(temp_name)
            raise TagIOError(f"Failed to write temporary file {temp_name}: {e}") from e

    logger.debug("Wrote %d tag bytes, audio copied from offset %d", len(tag), audio_offset)

    try:
        shutil.copymode(path, temp_name)
    except OSError as e:
        logger.debug("Could not copy file mode to %s: %s", temp_name, e)

    try:
        os.replace(temp_name, path)
    except OSError as e:
        logger.error("Failed to replace %s, new contents left in %s", path, temp_name)
        raise TagIOError(
            f"Failed to replace original file {path}; new data kept in {temp_name}",
            temp_path=temp_name,
        ) from e

    logger.info("Tags written to %s", path)

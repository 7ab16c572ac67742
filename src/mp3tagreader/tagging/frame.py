import logging
import struct
from typing import Optional

from ..constants import FRAME_HEADER_FORMAT, FRAME_HEADER_SIZE
from ..utils import decode_text, encode_text

logger = logging.getLogger(__name__)


class Frame:
    """One length-prefixed unit inside a tag: id, content and flags."""

    def __init__(self, frame_id: str, content: bytes = b"", flags: int = 0):
        self.frame_id = frame_id
        self.content = content
        self.flags = flags

    def __repr__(self):
        return f"Frame({self.frame_id!r}, {len(self.content)} bytes)"

    @property
    def size(self):
        """Length of the serialized frame, header included."""
        return FRAME_HEADER_SIZE + len(self.content)

    @property
    def text(self) -> str:
        return decode_text(self.content)

    @staticmethod
    def from_text(frame_id: str, text: str) -> "Frame":
        return Frame(frame_id, encode_text(text))

    def to_bytes(self) -> bytes:
        frame_id = self.frame_id.encode("ascii")
        if len(frame_id) != 4:
            raise ValueError(f"Frame id must be 4 characters: {self.frame_id!r}")
        return struct.pack(FRAME_HEADER_FORMAT, frame_id, len(self.content), 0) + self.content

    @staticmethod
    def from_file(f, limit: Optional[int] = None) -> Optional["Frame"]:
        """Return the next Frame from a file object, or None to stop.

        Iteration stops (None) when the frame header is cut short, when the
        id starts with a null byte (padding), or when the content cannot be
        read in full. ``limit`` is the number of bytes left in the file; a
        declared length beyond it counts as a short read.
        """
        header = f.read(FRAME_HEADER_SIZE)
        if len(header) < FRAME_HEADER_SIZE:
            logger.debug("Frame header cut short (%d bytes), stopping", len(header))
            return None

        raw_id, length, flags = struct.unpack(FRAME_HEADER_FORMAT, header)
        if raw_id[0] == 0:
            logger.debug("Reached padding")
            return None

        if limit is not None and length > limit - FRAME_HEADER_SIZE:
            logger.debug("Frame %r declares %d bytes, only %d left", raw_id, length,
                         limit - FRAME_HEADER_SIZE)
            return None

        content = f.read(length)
        if len(content) < length:
            logger.debug("Frame %r cut short, stopping", raw_id)
            return None

        return Frame(raw_id.decode("latin-1"), content, flags)

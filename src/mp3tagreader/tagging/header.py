import re
import struct

from ..constants import (
    DEFAULT_MAJOR_VERSION,
    DEFAULT_MINOR_VERSION,
    HEADER_FORMAT,
    HEADER_SIZE,
    MAGIC,
)
from ..errors import NoTagFoundError, TruncatedHeaderError
from ..utils import decode_synchsafe, encode_synchsafe

_VERSION_RE = re.compile(r"^ID3v2\.(\d+)(?:\.(\d+))?$")


class TagHeader:
    """The 10-byte block at the start of an ID3v2 tag.

    ``size`` is the length of the frame section that follows the header,
    stored on disk as a sync-safe integer. ``flags`` is carried along so a
    rewritten header keeps it, but it is never interpreted.
    """

    def __init__(self, major=DEFAULT_MAJOR_VERSION, minor=DEFAULT_MINOR_VERSION,
                 flags=0, size=0):
        self.major = major
        self.minor = minor
        self.flags = flags
        self.size = size

    def __repr__(self):
        return (f"TagHeader(major={self.major}, minor={self.minor}, "
                f"flags=0x{self.flags:02x}, size={self.size})")

    @property
    def version_string(self) -> str:
        """Human readable version, e.g. ``ID3v2.3`` or ``ID3v2.4.1``."""
        if self.minor:
            return f"ID3v2.{self.major}.{self.minor}"
        return f"ID3v2.{self.major}"

    @property
    def tag_end(self) -> int:
        """File offset of the first byte after the tag."""
        return HEADER_SIZE + self.size

    def to_bytes(self) -> bytes:
        return struct.pack(HEADER_FORMAT, MAGIC, self.major, self.minor,
                           self.flags, encode_synchsafe(self.size))

    @staticmethod
    def from_bytes(data: bytes) -> "TagHeader":
        """Return a TagHeader parsed from raw header bytes.

        Raises:
            TruncatedHeaderError: If fewer than 10 bytes are given
            NoTagFoundError: If the bytes do not start with ``ID3``
        """
        if len(data) < HEADER_SIZE:
            raise TruncatedHeaderError(
                f"Failed to read ID3 header: expected {HEADER_SIZE} bytes, got {len(data)}"
            )
        magic, major, minor, flags, raw_size = struct.unpack(HEADER_FORMAT, data[:HEADER_SIZE])
        if magic != MAGIC:
            raise NoTagFoundError("No ID3 tag found.")
        return TagHeader(major, minor, flags, decode_synchsafe(raw_size))

    @staticmethod
    def from_file(f) -> "TagHeader":
        return TagHeader.from_bytes(f.read(HEADER_SIZE))

    @staticmethod
    def for_version(version=None) -> "TagHeader":
        """Return an empty header for a version string such as ``ID3v2.3``.

        Unparseable or missing versions fall back to v2.3.0.
        """
        match = _VERSION_RE.match(version or "")
        if match is None:
            return TagHeader()
        return TagHeader(int(match.group(1)), int(match.group(2) or 0))

"""Exceptions raised by the ID3 tag codec.

Every failure of the reader, writer and editor is reported as a subclass of
:class:`Id3Error`, so callers can handle the whole family with a single
``except`` clause and still tell the cases apart by type.
"""

from typing import Optional


class Id3Error(Exception):
    """Base class for all tag codec errors."""


class NotAnMp3FileError(Id3Error):
    """The path does not carry the ``.mp3`` extension."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"File does not appear to be an MP3 file: {path}")


class TagIOError(Id3Error):
    """An open, read, write, rename or remove failed at the OS level.

    The underlying :class:`OSError` is chained as ``__cause__``. When the
    writer leaves a temporary file behind, its location is kept in
    ``temp_path`` for manual recovery.
    """

    def __init__(self, message: str, temp_path: Optional[str] = None):
        self.temp_path = temp_path
        super().__init__(message)


class TruncatedHeaderError(Id3Error):
    """Fewer than the 10 header bytes were available."""


class NoTagFoundError(Id3Error):
    """The file does not start with an ``ID3`` tag."""


class UnknownFieldError(Id3Error):
    """The field name is not one of the tag record fields."""

    def __init__(self, field_name):
        self.field_name = field_name
        super().__init__(f"Unknown tag: {field_name}")


class AllocationFailureError(Id3Error):
    """Memory ran out while building a tag record."""


class ReadFailedError(Id3Error):
    """Reading the tag failed during an edit."""


class WriteFailedError(Id3Error):
    """Writing the tag failed during an edit."""


class TagEncodeError(Id3Error):
    """A field value cannot be serialized (unencodable text or oversized tag)."""

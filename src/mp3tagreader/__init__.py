"""mp3tagreader.

Read, display and rewrite the ID3v2 tag at the start of MP3 files.

Main modules:
    cli: Command-line interface (mp3tagreader command)
    tagging: Tag record, reader, writer and editor

Core modules:
    config: Configuration management
    constants: Frame ids and binary layout
    errors: Exception hierarchy
    utils: Sync-safe integer and text helpers
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("mp3tagreader")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

from .errors import (
    Id3Error,
    NotAnMp3FileError,
    TagIOError,
    TruncatedHeaderError,
    NoTagFoundError,
    UnknownFieldError,
    AllocationFailureError,
    ReadFailedError,
    WriteFailedError,
    TagEncodeError,
)
from .tagging import TagRecord, read_tags, write_tags, edit_field, is_mp3_file

__all__ = [
    "__version__",
    "TagRecord",
    "read_tags",
    "write_tags",
    "edit_field",
    "is_mp3_file",
    "Id3Error",
    "NotAnMp3FileError",
    "TagIOError",
    "TruncatedHeaderError",
    "NoTagFoundError",
    "UnknownFieldError",
    "AllocationFailureError",
    "ReadFailedError",
    "WriteFailedError",
    "TagEncodeError",
]

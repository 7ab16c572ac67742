import os

from ..constants import MP3_EXTENSION
from ..errors import NotAnMp3FileError


def is_mp3_file(path) -> bool:
    """Return True if the file name ends with ``.mp3`` (case-sensitive).

    Only the name is checked; the file is not opened.
    """
    return os.fspath(path).endswith(MP3_EXTENSION)


def ensure_mp3_file(path) -> None:
    """Raise NotAnMp3FileError unless ``path`` passes :func:`is_mp3_file`."""
    if not is_mp3_file(path):
        raise NotAnMp3FileError(path)

import logging

from ..constants import COPY_CHUNK_SIZE
from ..errors import Id3Error, ReadFailedError, WriteFailedError
from .reader import read_tags
from .writer import write_tags

logger = logging.getLogger(__name__)


def edit_field(path, field_name: str, value: str, temp_path=None, temp_dir=None,
               chunk_size: int = COPY_CHUNK_SIZE) -> None:
    """Read the tag of ``path``, replace one field and write it back.

    The file must already carry a readable tag. An unknown field name is
    rejected before anything is written.

    Raises:
        ReadFailedError: If the existing tag cannot be read
        UnknownFieldError: If ``field_name`` is not a tag field
        WriteFailedError: If the updated tag cannot be written
    """
    try:
        record = read_tags(path)
    except Id3Error as e:
        raise ReadFailedError(f"Failed to read tags for editing: {e}") from e

    record.set_field(field_name, value)
    logger.debug("Set %s of %s to %r", field_name, path, value)

    try:
        write_tags(path, record, temp_path=temp_path, temp_dir=temp_dir,
                   chunk_size=chunk_size)
    except Id3Error as e:
        raise WriteFailedError(f"Failed to write tags: {e}") from e

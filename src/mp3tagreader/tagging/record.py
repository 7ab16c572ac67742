"""In-memory representation of one ID3 tag."""

from typing import Dict, Iterator, Optional, Tuple

from ..constants import FIELDS
from ..errors import UnknownFieldError


class TagRecord:
    """Holds the version and the six text fields of a tag.

    A field that is ``None`` means the frame is absent, which is different
    from a frame that is present with empty content (``""``).
    """

    def __init__(self, version=None, title=None, artist=None, album=None,
                 year=None, comment=None, genre=None):
        self.version: Optional[str] = version
        self.title: Optional[str] = title
        self.artist: Optional[str] = artist
        self.album: Optional[str] = album
        self.year: Optional[str] = year
        self.comment: Optional[str] = comment
        self.genre: Optional[str] = genre

    def __repr__(self):
        values = ", ".join(f"{name}={value!r}" for name, value in self.fields())
        return f"TagRecord(version={self.version!r}, {values})"

    def __eq__(self, other):
        if not isinstance(other, TagRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def fields(self) -> Iterator[Tuple[str, Optional[str]]]:
        """Yield (name, value) pairs in frame write order."""
        for name in FIELDS:
            yield name, getattr(self, name)

    def get_field(self, name: str) -> Optional[str]:
        if name not in FIELDS:
            raise UnknownFieldError(name)
        return getattr(self, name)

    def set_field(self, name: str, value: Optional[str]) -> None:
        """Replace the value of one field, discarding the previous one.

        Raises:
            UnknownFieldError: If ``name`` is not a tag field
        """
        if name not in FIELDS:
            raise UnknownFieldError(name)
        setattr(self, name, value)

    def is_empty(self) -> bool:
        """True if no field holds a value (the version is not a field)."""
        return all(value is None for _, value in self.fields())

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = {"version": self.version}
        data.update(self.fields())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Optional[str]]) -> "TagRecord":
        """Build a record from a mapping, ignoring keys that are not fields."""
        record = cls(version=data.get("version"))
        for name in FIELDS:
            value = data.get(name)
            if value is not None:
                record.set_field(name, str(value))
        return record

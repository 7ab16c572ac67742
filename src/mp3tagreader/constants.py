# ID3v2 tag header layout: "ID3", major, minor, flags, 4-byte sync-safe size
MAGIC = b"ID3"
HEADER_SIZE = 10
HEADER_FORMAT = ">3sBBB4s"

# Frame header layout: 4-byte id, 4-byte big-endian length, 2 flag bytes
FRAME_HEADER_SIZE = 10
FRAME_HEADER_FORMAT = ">4sIH"

# Largest value a 4-byte sync-safe integer can hold (28 usable bits)
MAX_SYNCHSAFE = (1 << 28) - 1

# Tag record fields, in the order frames are written
FIELDS = [
    "title",
    "artist",
    "album",
    "year",
    "comment",
    "genre",
]

FIELD_TO_FRAME = {
    "title": "TIT2",
    "artist": "TPE1",
    "album": "TALB",
    "year": "TYER",
    "comment": "COMM",
    "genre": "TCON",
}

FRAME_TO_FIELD = {frame_id: field for field, frame_id in FIELD_TO_FRAME.items()}

# Version used when a tag has to be created from scratch (v2.3.0)
DEFAULT_MAJOR_VERSION = 3
DEFAULT_MINOR_VERSION = 0

MP3_EXTENSION = ".mp3"

ENCODING = "utf-8"
FALLBACK_ENCODING = "latin-1"

# Chunk size used when copying audio data behind the tag
COPY_CHUNK_SIZE = 64 * 1024

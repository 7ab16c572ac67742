from .constants import ENCODING, FALLBACK_ENCODING, MAX_SYNCHSAFE


def decode_synchsafe(data: bytes) -> int:
    """Convert a 4-byte sync-safe integer to an int.

    Only the low 7 bits of each byte are used; the high bit is masked off.

    Args:
        data: The 4 raw bytes

    Returns:
        Decoded value (0 to 2**28 - 1)
    """
    if len(data) != 4:
        raise ValueError(f"Sync-safe integer needs 4 bytes, got {len(data)}")
    return (
        (data[0] & 0x7F) << 21
        | (data[1] & 0x7F) << 14
        | (data[2] & 0x7F) << 7
        | (data[3] & 0x7F)
    )


def encode_synchsafe(value: int) -> bytes:
    """Convert an int to a 4-byte sync-safe integer.

    Args:
        value: Value to encode

    Returns:
        4 bytes, each with its most significant bit cleared

    Raises:
        ValueError: If the value does not fit in 28 bits
    """
    if value < 0 or value > MAX_SYNCHSAFE:
        raise ValueError(f"Value {value} does not fit in a sync-safe integer")
    return bytes(
        [
            (value >> 21) & 0x7F,
            (value >> 14) & 0x7F,
            (value >> 7) & 0x7F,
            value & 0x7F,
        ]
    )


def decode_text(data: bytes) -> str:
    """Decode frame content without losing any byte.

    Bytes that are not valid UTF-8 are kept as lone surrogates, so
    :func:`encode_text` gives back exactly the bytes that were read.
    """
    return str(data, ENCODING, errors="surrogateescape")


def encode_text(text: str) -> bytes:
    return text.encode(ENCODING, errors="surrogateescape")


def display_text(text: str) -> str:
    """Return a printable form of a decoded field value.

    Values that were not valid UTF-8 on disk are shown as Latin-1, which can
    decode any byte sequence.
    """
    raw = encode_text(text)
    try:
        return str(raw, ENCODING)
    except UnicodeDecodeError:
        return str(raw, FALLBACK_ENCODING)

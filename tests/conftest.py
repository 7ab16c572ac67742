"""Pytest configuration and fixtures."""

import struct
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Stand-in for MPEG audio: a frame sync followed by a recognizable pattern
AUDIO_DATA = b"\xff\xfb\x90\x64" + bytes(range(256)) * 4


def make_frame(frame_id, content, flags=0):
    """Return the raw bytes of one frame."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return frame_id.encode("ascii") + struct.pack(">IH", len(content), flags) + content


def synchsafe(value):
    return bytes([(value >> 21) & 0x7F, (value >> 14) & 0x7F, (value >> 7) & 0x7F, value & 0x7F])


def make_tag(frames=b"", padding=0, size=None, major=3, minor=0, flags=0):
    """Return a tag block; size defaults to frames plus padding."""
    body = frames + b"\x00" * padding
    if size is None:
        size = len(body)
    return b"ID3" + bytes([major, minor, flags]) + synchsafe(size) + body


@pytest.fixture
def audio_data():
    return AUDIO_DATA


@pytest.fixture
def frame_bytes():
    """Factory building raw frame bytes."""
    return make_frame


@pytest.fixture
def tag_bytes():
    """Factory building raw tag bytes."""
    return make_tag


@pytest.fixture
def mp3_file(tmp_path):
    """Factory writing bytes to a file in a temporary directory."""

    def _write(data, name="song.mp3"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def tagged_mp3(mp3_file):
    """An MP3 file with title, artist and an unknown frame, plus padding."""
    frames = (
        make_frame("TIT2", "Original Title")
        + make_frame("PRIV", b"\x01\x02\x03")
        + make_frame("TPE1", "Original Artist")
    )
    return mp3_file(make_tag(frames, padding=64) + AUDIO_DATA)


@pytest.fixture
def config_path(tmp_path):
    """Path for a configuration file that does not exist yet."""
    return tmp_path / "config" / "config.toml"

"""Tests for writing tags into MP3 files."""

from unittest.mock import patch

import pytest
from mutagen.id3 import BitPaddedInt

from mp3tagreader.errors import NotAnMp3FileError, TagEncodeError, TagIOError
from mp3tagreader.tagging.reader import read_tags
from mp3tagreader.tagging.record import TagRecord
from mp3tagreader.tagging.writer import build_frames, render_tag, write_tags


@pytest.fixture
def full_record():
    return TagRecord(
        version="ID3v2.3",
        title="New Title",
        artist="New Artist",
        album="New Album",
        year="2024",
        comment="New Comment",
        genre="Electronic",
    )


class TestRenderTag:
    """Test building tag bytes from a record."""

    def test_frame_order(self):
        """Test that frames follow title, artist, album, year, comment, genre."""
        record = TagRecord(genre="G", title="T", year="Y")
        assert [frame.frame_id for frame in build_frames(record)] == ["TIT2", "TYER", "TCON"]

    def test_absent_fields_skipped(self):
        record = TagRecord(title="Only")
        assert render_tag(record) == (
            b"ID3\x03\x00\x00\x00\x00\x00\x0e" + b"TIT2\x00\x00\x00\x04\x00\x00Only"
        )

    def test_empty_string_written(self):
        """Test that a present but empty field still produces a frame."""
        assert len(build_frames(TagRecord(comment=""))) == 1

    def test_empty_record(self):
        assert render_tag(TagRecord()) == b"ID3\x03\x00\x00\x00\x00\x00\x00"

    def test_version_from_record(self):
        assert render_tag(TagRecord(version="ID3v2.4"))[3] == 4


class TestWriteTags:
    """Test write_tags on files."""

    def test_round_trip(self, tagged_mp3, full_record):
        """Test that all six fields read back as written."""
        write_tags(tagged_mp3, full_record)
        record = read_tags(tagged_mp3)
        assert list(record.fields()) == list(full_record.fields())

    def test_audio_preserved(self, tagged_mp3, full_record, audio_data):
        """Test that the bytes after the old tag are copied unchanged."""
        write_tags(tagged_mp3, full_record)
        data = tagged_mp3.read_bytes()
        assert data.endswith(audio_data)
        assert len(data) == len(render_tag(full_record)) + len(audio_data)

    def test_header_size_recomputed(self, tagged_mp3, full_record):
        """Test that the declared size matches the new frame section."""
        write_tags(tagged_mp3, full_record)
        data = tagged_mp3.read_bytes()
        frames_length = sum(frame.size for frame in build_frames(full_record))
        assert BitPaddedInt(data[6:10]) == frames_length

    def test_header_version_and_flags_kept(self, mp3_file, tag_bytes, audio_data):
        path = mp3_file(tag_bytes(major=4, minor=0, flags=0x10) + audio_data)
        write_tags(path, TagRecord(version="ID3v2.3", title="X"))
        data = path.read_bytes()
        assert data[:6] == b"ID3\x04\x00\x10"

    def test_large_original_tag_skipped(self, mp3_file, tag_bytes, frame_bytes, audio_data):
        """Test that the old tag is skipped by its declared size, however large."""
        frames = frame_bytes("TIT2", "Old") + frame_bytes("PRIV", b"\x01" * 2000)
        path = mp3_file(tag_bytes(frames, padding=500) + audio_data)

        write_tags(path, TagRecord(title="New"))

        data = path.read_bytes()
        assert data == render_tag(TagRecord(version="ID3v2.3", title="New")) + audio_data

    def test_small_original_tag_skipped(self, mp3_file, tag_bytes, audio_data):
        path = mp3_file(tag_bytes() + audio_data)
        write_tags(path, TagRecord(artist="A"))
        assert path.read_bytes().endswith(audio_data)
        assert read_tags(path).artist == "A"

    def test_untagged_file(self, mp3_file, audio_data):
        """Test that a file without a tag gets a fresh header and keeps all audio."""
        path = mp3_file(audio_data)
        write_tags(path, TagRecord(version="ID3v2.4", title="Fresh"))

        data = path.read_bytes()
        assert data[:5] == b"ID3\x04\x00"
        assert data.endswith(audio_data)
        assert read_tags(path).title == "Fresh"

    def test_unknown_frames_dropped(self, tagged_mp3):
        write_tags(tagged_mp3, TagRecord(title="T"))
        assert b"PRIV" not in tagged_mp3.read_bytes()

    def test_non_ascii_round_trip(self, tagged_mp3):
        write_tags(tagged_mp3, TagRecord(title="日本語", artist="Sigur Rós"))
        record = read_tags(tagged_mp3)
        assert (record.title, record.artist) == ("日本語", "Sigur Rós")

    def test_no_temp_file_left(self, tagged_mp3, full_record):
        write_tags(tagged_mp3, full_record)
        assert [p.name for p in tagged_mp3.parent.iterdir()] == [tagged_mp3.name]

    def test_surrogate_escaped_value(self, tagged_mp3, frame_bytes):
        """Test that a value decoded from non-UTF-8 bytes is written as those bytes."""
        write_tags(tagged_mp3, TagRecord(title="caf\udce9"))
        assert frame_bytes("TIT2", b"caf\xe9") in tagged_mp3.read_bytes()
        assert read_tags(tagged_mp3).title == "caf\udce9"

    def test_unencodable_value(self, tagged_mp3):
        """Test that text which has no byte form is an Id3Error and nothing changes."""
        before = tagged_mp3.read_bytes()
        with pytest.raises(TagEncodeError):
            write_tags(tagged_mp3, TagRecord(title="\ud800"))
        assert tagged_mp3.read_bytes() == before
        assert [p.name for p in tagged_mp3.parent.iterdir()] == [tagged_mp3.name]

    def test_explicit_temp_path(self, tagged_mp3, full_record, tmp_path):
        """Test writing through a caller supplied temporary path."""
        temp_path = tmp_path / "work.tmp"
        write_tags(tagged_mp3, full_record, temp_path=temp_path)
        assert not temp_path.exists()
        assert read_tags(tagged_mp3).title == "New Title"

    def test_temp_dir(self, tagged_mp3, full_record, tmp_path):
        temp_dir = tmp_path / "scratch"
        temp_dir.mkdir()
        write_tags(tagged_mp3, full_record, temp_dir=temp_dir)
        assert list(temp_dir.iterdir()) == []
        assert read_tags(tagged_mp3).genre == "Electronic"

    def test_small_chunk_size(self, tagged_mp3, full_record, audio_data):
        write_tags(tagged_mp3, full_record, chunk_size=7)
        assert tagged_mp3.read_bytes().endswith(audio_data)

    @pytest.mark.parametrize("name", ["song.wav", "song.Mp3", "song"])
    def test_not_an_mp3_file(self, name, full_record):
        with patch("builtins.open") as mock_open:
            with pytest.raises(NotAnMp3FileError):
                write_tags(name, full_record)
        mock_open.assert_not_called()

    def test_missing_file(self, tmp_path, full_record):
        with pytest.raises(TagIOError):
            write_tags(tmp_path / "missing.mp3", full_record)
        assert list(tmp_path.iterdir()) == []

    def test_temp_file_cannot_be_created(self, tagged_mp3, full_record, tmp_path):
        """Test that the original is untouched if the temporary file fails."""
        before = tagged_mp3.read_bytes()
        with pytest.raises(TagIOError):
            write_tags(tagged_mp3, full_record, temp_dir=tmp_path / "does-not-exist")
        assert tagged_mp3.read_bytes() == before

    def test_replace_failure_keeps_temp_file(self, tagged_mp3, full_record):
        """Test that a failed replace leaves the new data in the temporary file."""
        before = tagged_mp3.read_bytes()
        with patch("mp3tagreader.tagging.writer.os.replace", side_effect=OSError("busy")):
            with pytest.raises(TagIOError) as excinfo:
                write_tags(tagged_mp3, full_record)

        temp_path = excinfo.value.temp_path
        assert temp_path is not None
        assert tagged_mp3.read_bytes() == before
        with open(temp_path, "rb") as f:
            assert f.read(3) == b"ID3"

    def test_copy_failure_removes_temp_file(self, tagged_mp3, full_record):
        """Test that a failed audio copy discards the partial temporary file."""
        before = tagged_mp3.read_bytes()
        with patch("mp3tagreader.tagging.writer.shutil.copyfileobj", side_effect=OSError("disk full")):
            with pytest.raises(TagIOError, match="Failed to write temporary file"):
                write_tags(tagged_mp3, full_record)

        assert tagged_mp3.read_bytes() == before
        assert [p.name for p in tagged_mp3.parent.iterdir()] == [tagged_mp3.name]

"""
Tests for catalog directory classification in scanner.py.
"""

import pytest

from music_shelf.domain.library.scanner import (
    classify_entries,
    is_supported_format,
    list_audio_files,
)


class TestIsSupportedFormat:
    """Test extension matching."""

    @pytest.mark.parametrize(
        "filename", ["a.mp3", "b.flac", "c.m4a", "d.wav", "e.aac"]
    )
    def test_accepts_default_formats(self, filename):
        assert is_supported_format(filename, [".mp3", ".flac", ".m4a", ".wav", ".aac"])

    def test_case_insensitive(self):
        """Test uppercase extensions are matched."""
        assert is_supported_format("LOUD.MP3", [".mp3"])
        assert is_supported_format("Mixed.FlAc", [".flac"])

    def test_rejects_other_extensions(self):
        assert not is_supported_format("cover.jpg", [".mp3"])
        assert not is_supported_format("notes.txt", [".mp3"])

    def test_rejects_no_extension(self):
        assert not is_supported_format("mp3", [".mp3"])

    def test_only_last_suffix_counts(self):
        """Test 'song.mp3.part' is not treated as audio."""
        assert not is_supported_format("song.mp3.part", [".mp3"])


class TestClassifyEntries:
    """Test pure filtering of directory listings."""

    def test_preserves_input_order(self):
        entries = ["z.mp3", "cover.jpg", "a.flac", "b.WAV", "readme.md"]
        assert classify_entries(entries) == ["z.mp3", "a.flac", "b.WAV"]

    def test_empty_listing(self):
        assert classify_entries([]) == []

    def test_custom_formats(self):
        assert classify_entries(["a.mp3", "b.opus"], [".opus"]) == ["b.opus"]


class TestListAudioFiles:
    """Test reading a real directory."""

    def test_lists_only_supported_files(self, tmp_path):
        for name in ["one.mp3", "two.m4a", "cover.jpg", "notes.txt"]:
            (tmp_path / name).write_bytes(b"x")

        result = list_audio_files(tmp_path)
        assert sorted(result) == ["one.mp3", "two.m4a"]

    def test_skips_directories_named_like_audio(self, tmp_path):
        (tmp_path / "album.mp3").mkdir()
        (tmp_path / "real.mp3").write_bytes(b"x")

        assert list_audio_files(tmp_path) == ["real.mp3"]

    def test_does_not_recurse(self, tmp_path):
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "deep.mp3").write_bytes(b"x")

        assert list_audio_files(tmp_path) == []

    def test_skips_symlinks_escaping_directory(self, tmp_path):
        catalog = tmp_path / "catalog"
        catalog.mkdir()
        outside = tmp_path / "outside.mp3"
        outside.write_bytes(b"x")
        (catalog / "escape.mp3").symlink_to(outside)
        (catalog / "local.mp3").write_bytes(b"x")

        assert list_audio_files(catalog) == ["local.mp3"]

    def test_keeps_symlinks_within_directory(self, tmp_path):
        (tmp_path / "target.mp3").write_bytes(b"x")
        (tmp_path / "alias.mp3").symlink_to(tmp_path / "target.mp3")

        assert sorted(list_audio_files(tmp_path)) == ["alias.mp3", "target.mp3"]

    def test_missing_directory_raises(self, tmp_path):
        """Test directory read failures propagate to the caller."""
        with pytest.raises(OSError):
            list_audio_files(tmp_path / "missing")

"""Tests for the sources module."""

import pytest
import tempfile
import urllib.error
import urllib.request
from pathlib import Path

from lexibit.errors import InvalidSourceError
from lexibit.sources import is_url, parse_word_list, read_source


class FakeResponse:
    """Minimal urlopen response."""

    def __init__(self, payload: bytes):
        self.payload = payload

    def read(self) -> bytes:
        return self.payload

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class TestReadSource:
    """Tests for read_source."""

    def test_is_url(self):
        """Test URL detection."""
        assert is_url("https://example.com/4-letter.json")
        assert is_url("HTTP://example.com/common.csv")
        assert not is_url("4-letter.json")
        assert not is_url(Path("https://not-a-url"))

    def test_read_file(self):
        """Test reading a local file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "common.csv")
            filepath.write_text("cold,warm", encoding="utf-8")
            assert read_source(filepath) == "cold,warm"
            assert read_source(str(filepath)) == "cold,warm"

    def test_read_missing_file(self):
        """Test a missing file is an invalid source."""
        with pytest.raises(InvalidSourceError) as exc:
            read_source("/nonexistent/common.csv")
        assert exc.value.source == "/nonexistent/common.csv"

    def test_read_binary_file(self):
        """Test undecodable content is an invalid source."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir, "4-letter.json")
            filepath.write_bytes(b"\xff\xfe\x00")
            with pytest.raises(InvalidSourceError):
                read_source(filepath)

    def test_read_url(self, monkeypatch):
        """Test reading a URL."""
        seen = {}

        def fake_urlopen(url, timeout=None):
            seen["url"] = url
            return FakeResponse(b"cold,warm")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        assert read_source("https://example.com/common.csv") == "cold,warm"
        assert seen["url"] == "https://example.com/common.csv"

    def test_read_url_error(self, monkeypatch):
        """Test network failures are invalid sources."""
        def fake_urlopen(url, timeout=None):
            raise urllib.error.URLError("unreachable")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        with pytest.raises(InvalidSourceError):
            read_source("https://example.com/common.csv")


class TestParseWordList:
    """Tests for parse_word_list."""

    def test_parse(self):
        """Test comma and newline separated entries."""
        assert parse_word_list("cold, warm,,COLD\nbone") == ["cold", "warm", "bone"]

    def test_parse_length_filter(self):
        """Test filtering by word length."""
        assert parse_word_list("cold,apple,cat,warm", word_length=4) == ["cold", "warm"]

    def test_parse_drops_invalid(self):
        """Test entries that are not words are dropped."""
        assert parse_word_list("co1d,don't,warm") == ["warm"]

    def test_parse_empty(self):
        """Test the empty list."""
        assert parse_word_list("") == []

"""Tests for hakobi.compression module."""

import gzip
import zlib

import brotli
import pytest

from hakobi.compression import (
    DEFAULT_ENCODINGS,
    SUPPORTED_ENCODINGS,
    encode_body,
    negotiate_encoding,
)


class TestNegotiateEncoding:
    """Tests for negotiate_encoding function."""

    def test_gzip_requested(self):
        """Test gzip is chosen when the client lists it."""
        assert negotiate_encoding("gzip") == "gzip"

    def test_gzip_among_others(self):
        """Test gzip is found in a list of encodings."""
        assert negotiate_encoding("invalid-encoding-1, gzip, invalid-encoding-2") == "gzip"

    def test_substring_match(self):
        """Test any occurrence of the name counts."""
        assert negotiate_encoding("x-gzip") == "gzip"

    def test_case_insensitive(self):
        """Test the header value is matched case-insensitively."""
        assert negotiate_encoding("GZIP") == "gzip"

    def test_unsupported_only(self):
        """Test no encoding is chosen for unknown encodings."""
        assert negotiate_encoding("invalid-encoding") is None

    def test_missing_header(self):
        """Test no encoding without a header."""
        assert negotiate_encoding(None) is None
        assert negotiate_encoding("") is None

    def test_default_offers_gzip_only(self):
        """Test brotli is not offered unless configured."""
        assert DEFAULT_ENCODINGS == ("gzip",)
        assert negotiate_encoding("br") is None

    def test_server_preference_order(self):
        """Test the first offered encoding the client accepts wins."""
        assert negotiate_encoding("gzip, br", ("br", "gzip")) == "br"
        assert negotiate_encoding("gzip, br", ("gzip", "br")) == "gzip"

    def test_deflate(self):
        """Test deflate can be offered."""
        assert negotiate_encoding("deflate", SUPPORTED_ENCODINGS) == "deflate"


class TestEncodeBody:
    """Tests for encode_body function."""

    def test_gzip(self):
        """Test gzip output uses standard gzip framing."""
        encoded = encode_body(b"hello world", "gzip")
        assert encoded[:2] == b"\x1f\x8b"
        assert gzip.decompress(encoded) == b"hello world"

    def test_deflate(self):
        """Test deflate output is zlib-wrapped."""
        assert zlib.decompress(encode_body(b"hello world", "deflate")) == b"hello world"

    def test_brotli(self):
        """Test brotli output decompresses."""
        assert brotli.decompress(encode_body(b"hello world", "br")) == b"hello world"

    def test_empty_body(self):
        """Test an empty payload still produces a valid gzip stream."""
        assert gzip.decompress(encode_body(b"", "gzip")) == b""

    def test_unknown_encoding(self):
        """Test unknown encodings are rejected."""
        with pytest.raises(ValueError, match="Unsupported"):
            encode_body(b"data", "compress")

"""
Response compression.

Supports gzip, deflate, and brotli (br) encodings. Only gzip is offered
unless the server is configured otherwise.
"""

from __future__ import annotations

import gzip
import zlib

import brotli

SUPPORTED_ENCODINGS = ("gzip", "deflate", "br")

DEFAULT_ENCODINGS = ("gzip",)


def negotiate_encoding(
    accept_encoding: str | None,
    supported: tuple[str, ...] = DEFAULT_ENCODINGS,
) -> str | None:
    """
    Pick the response encoding for an Accept-Encoding header value.

    Args:
        accept_encoding: Value of the request's Accept-Encoding header
        supported: Encodings the server offers, in preference order

    Returns:
        The first offered encoding named anywhere in the header, or None
    """
    if not accept_encoding:
        return None

    requested = accept_encoding.lower()
    for encoding in supported:
        if encoding in requested:
            return encoding
    return None


def encode_body(body: bytes, encoding: str) -> bytes:
    """
    Encode a response body with a single content encoding.

    Args:
        body: Raw payload bytes
        encoding: One of SUPPORTED_ENCODINGS

    Returns:
        Encoded body bytes
    """
    if encoding == "gzip":
        return gzip.compress(body)

    if encoding == "deflate":
        return zlib.compress(body)

    if encoding == "br":
        return brotli.compress(body)

    raise ValueError(f"Unsupported content encoding: {encoding}")

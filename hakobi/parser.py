from __future__ import annotations

import logging

from .errors import MalformedRequestLine, ReadError
from .headers import parse_header_line
from .models import Request, RequestLine
from .reader import LineReader

logger = logging.getLogger(__name__)

HEADER_TERMINATOR = b"\r\n"


def parse_request_line(line: bytes) -> RequestLine:
    """
    Split a raw request line on ASCII whitespace into method, path and
    protocol. Fields are decoded afterwards so every byte survives.
    """
    fields = line.split()
    if len(fields) < 3:
        raise MalformedRequestLine(f"Malformed request line: {line!r}")
    method, path, protocol_version = (f.decode("latin-1") for f in fields[:3])
    return RequestLine(method, path, protocol_version)


def content_length(headers: dict[str, str]) -> int:
    """
    Body length announced by the headers. Missing values and anything
    other than plain ASCII digits count as an empty body.
    """
    value = headers.get("content-length")
    if value is None:
        return 0
    if not (value.isascii() and value.isdigit()):
        logger.debug("Ignoring non-numeric Content-Length %r", value)
        return 0
    return int(value)


async def read_headers(reader: LineReader) -> dict[str, str]:
    headers: dict[str, str] = {}
    while True:
        try:
            line = await reader.readline()
        except ReadError as exc:
            logger.debug("Stopped reading headers: %s", exc)
            break
        if line == HEADER_TERMINATOR:
            break
        parsed = parse_header_line(line)
        if parsed is None:
            logger.debug("Skipping header line without colon: %r", line)
            continue
        name, value = parsed
        headers[name] = value
    return headers


async def read_request(reader: LineReader) -> Request:
    """
    Read one request from the connection: request line, headers up to the
    blank line, then a body of ``Content-Length`` bytes if announced.
    """
    try:
        raw_line = await reader.readline()
    except ReadError as exc:
        raise MalformedRequestLine(f"No request line: {exc}") from exc
    request_line = parse_request_line(raw_line)

    headers = await read_headers(reader)
    body = await reader.read_exact(content_length(headers))
    return Request(request_line, headers, body)

from __future__ import annotations

from typing import NamedTuple


class RequestLine(NamedTuple):
    method: str
    path: str
    protocol_version: str


class Request:
    """
    Parsed HTTP request. Header names are stored lower-cased; the last
    occurrence of a repeated header wins.
    """

    def __init__(
        self,
        request_line: RequestLine,
        headers: dict[str, str],
        body: bytes = b"",
    ) -> None:
        self.request_line = request_line
        self.headers = headers
        self.body = body

    @property
    def method(self) -> str:
        return self.request_line.method

    @property
    def path(self) -> str:
        return self.request_line.path

    @property
    def protocol_version(self) -> str:
        return self.request_line.protocol_version

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    def __repr__(self) -> str:
        return f"<Request [{self.method} {self.path}] {len(self.body)} bytes>"


class ResponseIntent:
    """
    What a handler wants written back: a status, and optionally a typed body
    with the content encoding negotiated for it.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        content_type: str | None = None,
        body: bytes | None = None,
        content_encoding: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.content_type = content_type
        self.body = body
        self.content_encoding = content_encoding

    @property
    def has_content(self) -> bool:
        return self.content_type is not None and self.body is not None

    @property
    def use_compression(self) -> bool:
        return self.content_encoding is not None

    def __repr__(self) -> str:
        size = len(self.body) if self.body is not None else 0
        return f"<ResponseIntent [{self.status_code}] {size} bytes>"

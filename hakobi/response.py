from __future__ import annotations

import asyncio

from .compression import encode_body
from .errors import ConnectionError
from .headers import order_headers
from .models import ResponseIntent

HTTP11 = "HTTP/1.1"
CRLF = b"\r\n"


def render_response(intent: ResponseIntent) -> bytes:
    """
    Serialize a response: status line, headers, blank line, body. Responses
    without content carry no Content-Type or Content-Length.
    """
    lines = [f"{HTTP11} {intent.status_code} {intent.reason}\r\n".encode("latin-1")]
    body = b""
    if intent.has_content:
        assert intent.content_type is not None and intent.body is not None
        body = intent.body
        headers = {"Content-Type": intent.content_type}
        if intent.content_encoding is not None:
            body = encode_body(body, intent.content_encoding)
            headers["Content-Encoding"] = intent.content_encoding
        headers["Content-Length"] = str(len(body))
        for name, value in order_headers(headers):
            lines.append(f"{name}: {value}\r\n".encode("latin-1"))
    lines.append(CRLF)
    if body:
        lines.append(body)
    return b"".join(lines)


class ResponseWriter:
    """
    Writes a single response onto a connection.
    """

    def __init__(self, stream: asyncio.StreamWriter) -> None:
        self.stream = stream

    async def send(self, intent: ResponseIntent) -> None:
        data = render_response(intent)
        try:
            self.stream.write(data)
            await self.stream.drain()
        except OSError as exc:
            raise ConnectionError(f"Send failed: {exc}") from exc

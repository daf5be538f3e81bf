from __future__ import annotations

import asyncio

from .errors import ReadError


class LineReader:
    """
    Line-oriented view over an asyncio stream. Header lines and the body are
    read through the same buffered stream, so nothing is lost between them.
    """

    def __init__(self, stream: asyncio.StreamReader) -> None:
        self.stream = stream

    async def readline(self) -> bytes:
        try:
            line = await self.stream.readline()
        except ValueError as exc:
            # StreamReader reports an over-long line as ValueError.
            raise ReadError(f"Line exceeds buffer limit: {exc}") from exc
        except OSError as exc:
            raise ReadError(f"Read failed: {exc}") from exc
        if not line.endswith(b"\n"):
            raise ReadError("Unexpected EOF while reading line")
        return line

    async def read_exact(self, n: int) -> bytes:
        if n <= 0:
            return b""
        try:
            return await self.stream.readexactly(n)
        except asyncio.IncompleteReadError as exc:
            # Short bodies are truncated rather than rejected.
            return exc.partial
        except OSError as exc:
            raise ReadError(f"Read failed: {exc}") from exc

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus

from .config import ServerConfig
from .errors import ProtocolError
from .models import ResponseIntent
from .parser import read_request
from .reader import LineReader
from .response import ResponseWriter
from .router import Router
from .storage import FileStore

logger = logging.getLogger(__name__)


class Server:
    """
    TCP listener that answers exactly one request per accepted connection.
    Each connection runs in its own task, so a slow client never holds up
    accepting the next one.
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        router: Router | None = None,
    ) -> None:
        self.config = config or ServerConfig()
        self.router = router or Router(
            FileStore(self.config.directory), self.config.encodings
        )
        self._server: asyncio.AbstractServer | None = None

    @property
    def port(self) -> int:
        if self._server is None or not self._server.sockets:
            return self.config.port
        return self._server.sockets[0].getsockname()[1]

    async def start(self) -> None:
        if self._server is not None:
            return
        self._server = await asyncio.start_server(
            self.handle_connection, self.config.host, self.config.port
        )
        logger.info("Listening on %s:%d", self.config.host, self.port)

    async def serve_forever(self) -> None:
        await self.start()
        assert self._server is not None
        await self._server.serve_forever()

    async def close(self) -> None:
        if self._server is None:
            return
        self._server.close()
        await self._server.wait_closed()
        self._server = None

    async def __aenter__(self) -> "Server":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def handle_connection(
        self,
        stream_reader: asyncio.StreamReader,
        stream_writer: asyncio.StreamWriter,
    ) -> None:
        peer = stream_writer.get_extra_info("peername")
        logger.info("Accepted connection from %s", peer)
        writer = ResponseWriter(stream_writer)
        try:
            try:
                request = await read_request(LineReader(stream_reader))
            except ProtocolError as exc:
                logger.info("Bad request from %s: %s", peer, exc)
                code = HTTPStatus.BAD_REQUEST
                await writer.send(ResponseIntent(code.value, code.phrase))
                return
            intent = await self.router.dispatch(request)
            logger.info(
                "%s %s -> %d", request.method, request.path, intent.status_code
            )
            await writer.send(intent)
        except Exception:
            logger.exception("Connection from %s failed", peer)
        finally:
            stream_writer.close()
            try:
                await stream_writer.wait_closed()
            except OSError as exc:
                logger.debug("Closing connection from %s failed: %s", peer, exc)

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus

from .compression import DEFAULT_ENCODINGS, negotiate_encoding
from .errors import PathTraversalError, StorageError
from .models import Request, ResponseIntent
from .storage import FileStore

logger = logging.getLogger(__name__)

NO_MESSAGE = "No message provided"


def status(code: HTTPStatus) -> ResponseIntent:
    return ResponseIntent(code.value, code.phrase)


def split_path(path: str) -> tuple[str, str | None]:
    """
    Return the handler family and its argument: the first two path
    segments, taken verbatim without URL-decoding.
    """
    if path.startswith("/"):
        path = path[1:]
    segments = path.split("/")
    argument = segments[1] if len(segments) > 1 else None
    return segments[0], argument


class Router:
    """
    Maps a request's method and path to one of the built-in handlers.
    """

    def __init__(
        self,
        store: FileStore,
        encodings: tuple[str, ...] = DEFAULT_ENCODINGS,
    ) -> None:
        self.store = store
        self.encodings = encodings

    async def dispatch(self, request: Request) -> ResponseIntent:
        if request.method == "GET":
            return await self.get(request)
        if request.method == "POST":
            return await self.post(request)
        return status(HTTPStatus.METHOD_NOT_ALLOWED)

    async def get(self, request: Request) -> ResponseIntent:
        if request.path in ("", "/"):
            return status(HTTPStatus.OK)

        family, argument = split_path(request.path)
        if family == "echo":
            return self.content(request, "text/plain", (argument or NO_MESSAGE).encode("latin-1"))
        if family == "user-agent":
            user_agent = request.header("user-agent")
            if user_agent is None:
                return status(HTTPStatus.BAD_REQUEST)
            return self.content(request, "text/plain", user_agent.encode("latin-1"))
        if family == "files":
            return await self.read_file(request, argument)
        return status(HTTPStatus.NOT_FOUND)

    async def post(self, request: Request) -> ResponseIntent:
        family, argument = split_path(request.path)
        if family == "files":
            return await self.write_file(request, argument)
        return status(HTTPStatus.NOT_FOUND)

    async def read_file(self, request: Request, name: str | None) -> ResponseIntent:
        if not name:
            return status(HTTPStatus.NOT_FOUND)
        try:
            data = await asyncio.to_thread(self.store.read, name)
        except PathTraversalError:
            return status(HTTPStatus.NOT_FOUND)
        except StorageError as exc:
            logger.info("File lookup failed: %s", exc)
            return status(HTTPStatus.NOT_FOUND)
        return self.content(request, "application/octet-stream", data)

    async def write_file(self, request: Request, name: str | None) -> ResponseIntent:
        if not name:
            return status(HTTPStatus.BAD_REQUEST)
        try:
            await asyncio.to_thread(self.store.write, name, request.body)
        except PathTraversalError:
            return status(HTTPStatus.BAD_REQUEST)
        except StorageError as exc:
            logger.warning("File write failed: %s", exc)
            return status(HTTPStatus.BAD_REQUEST)
        return status(HTTPStatus.CREATED)

    def content(self, request: Request, content_type: str, body: bytes) -> ResponseIntent:
        encoding = negotiate_encoding(request.header("accept-encoding"), self.encodings)
        return ResponseIntent(
            HTTPStatus.OK.value,
            HTTPStatus.OK.phrase,
            content_type=content_type,
            body=body,
            content_encoding=encoding,
        )

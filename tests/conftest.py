"""Pytest configuration and fixtures."""

import asyncio

import pytest
from hakobi.models import Request, RequestLine
from hakobi.storage import FileStore


class FakeStreamWriter:
    """Collects everything written to it, standing in for asyncio.StreamWriter."""

    def __init__(self, peername=("127.0.0.1", 50000)):
        self.buffer = bytearray()
        self.closed = False
        self.peername = peername

    def write(self, data):
        self.buffer.extend(data)

    async def drain(self):
        pass

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass

    def get_extra_info(self, name, default=None):
        if name == "peername":
            return self.peername
        return default


def make_stream(data: bytes, eof: bool = True, limit: int = 2 ** 16) -> asyncio.StreamReader:
    """Build a StreamReader preloaded with data. Call from inside a running loop."""
    stream = asyncio.StreamReader(limit=limit)
    stream.feed_data(data)
    if eof:
        stream.feed_eof()
    return stream


def make_request(method="GET", path="/", headers=None, body=b""):
    return Request(RequestLine(method, path, "HTTP/1.1"), dict(headers or {}), body)


@pytest.fixture
def fake_writer():
    return FakeStreamWriter()


@pytest.fixture
def store(tmp_path):
    return FileStore(str(tmp_path))


@pytest.fixture
def sample_request():
    """Create a sample Request object."""
    return make_request(
        "GET",
        "/echo/hello",
        headers={
            "host": "localhost:4221",
            "user-agent": "curl/8.4.0",
            "accept-encoding": "gzip, deflate",
        },
    )

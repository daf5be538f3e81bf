from hakobi.config import ServerConfig
from hakobi.errors import (
    HakobiError,
    ConnectionError,
    ReadError,
    ProtocolError,
    MalformedRequestLine,
    StorageError,
    PathTraversalError,
)
from hakobi.models import Request, RequestLine, ResponseIntent
from hakobi.parser import read_request
from hakobi.reader import LineReader
from hakobi.response import ResponseWriter, render_response
from hakobi.router import Router
from hakobi.server import Server
from hakobi.storage import FileStore

__all__ = [
    "ServerConfig",
    "HakobiError",
    "ConnectionError",
    "ReadError",
    "ProtocolError",
    "MalformedRequestLine",
    "StorageError",
    "PathTraversalError",
    "Request",
    "RequestLine",
    "ResponseIntent",
    "read_request",
    "LineReader",
    "ResponseWriter",
    "render_response",
    "Router",
    "Server",
    "FileStore",
]

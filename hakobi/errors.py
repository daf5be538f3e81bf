class HakobiError(Exception):
    """Base error for Hakobi."""


class ConnectionError(HakobiError):
    """Raised when writing to a client connection fails."""


class ReadError(ConnectionError):
    """Raised when a connection ends before a complete line or fails mid-read."""


class ProtocolError(HakobiError):
    """Raised when a request cannot be parsed."""


class MalformedRequestLine(ProtocolError):
    """Raised when the request line has fewer than three fields."""


class StorageError(HakobiError):
    """Raised when a file cannot be read from or written to the store."""


class PathTraversalError(StorageError):
    """Raised when a file name resolves outside the storage directory."""

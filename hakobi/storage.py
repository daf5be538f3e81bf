from __future__ import annotations

import logging
import os

from .errors import PathTraversalError, StorageError

logger = logging.getLogger(__name__)


class FileStore:
    """
    Flat file storage rooted at a single directory. Every name is resolved
    inside that directory before any I/O happens.
    """

    def __init__(self, directory: str) -> None:
        self.directory = os.path.realpath(directory)

    def resolve(self, name: str) -> str:
        if "\x00" in name:
            # Names with embedded NUL bytes cannot reach the filesystem.
            raise StorageError(f"Invalid file name {name!r}: embedded null byte")
        file_path = os.path.realpath(os.path.join(self.directory, name))
        if (
            not name
            or file_path == self.directory
            or os.path.commonpath([file_path, self.directory]) != self.directory
        ):
            logger.warning("Rejected file name outside storage directory: %r", name)
            raise PathTraversalError(f"File name escapes storage directory: {name!r}")
        return file_path

    def read(self, name: str) -> bytes:
        file_path = self.resolve(name)
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as exc:
            raise StorageError(f"Read failed for {name!r}: {exc}") from exc

    def write(self, name: str, data: bytes) -> None:
        file_path = self.resolve(name)
        try:
            with open(file_path, "wb") as f:
                f.write(data)
        except OSError as exc:
            raise StorageError(f"Write failed for {name!r}: {exc}") from exc

    def __repr__(self) -> str:
        return f"<FileStore {self.directory}>"

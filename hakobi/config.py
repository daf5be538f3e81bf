from __future__ import annotations

import logging
from dataclasses import dataclass

from .compression import DEFAULT_ENCODINGS, SUPPORTED_ENCODINGS

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4221
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class ServerConfig:
    """
    Settings for a Server: listening address, storage directory, offered
    response encodings (in preference order) and log level.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    directory: str = "."
    encodings: tuple[str, ...] = DEFAULT_ENCODINGS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.encodings = tuple(self.encodings)
        unknown = [e for e in self.encodings if e not in SUPPORTED_ENCODINGS]
        if unknown:
            raise ValueError(f"Unsupported encodings: {', '.join(unknown)}")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"Port out of range: {self.port}")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging at the given level name."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    return logging.getLogger("hakobi")

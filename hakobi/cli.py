from __future__ import annotations

import asyncio

import click

from .compression import SUPPORTED_ENCODINGS
from .config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig, setup_logging
from .server import Server


@click.command()
@click.option(
    "--directory",
    "-d",
    default=".",
    envvar="HAKOBI_DIRECTORY",
    show_default=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory served under /files/.",
)
@click.option("--host", default=DEFAULT_HOST, envvar="HAKOBI_HOST", show_default=True)
@click.option(
    "--port", "-p", default=DEFAULT_PORT, envvar="HAKOBI_PORT", show_default=True, type=int
)
@click.option(
    "--encoding",
    "-e",
    "encodings",
    multiple=True,
    default=("gzip",),
    show_default=True,
    type=click.Choice(SUPPORTED_ENCODINGS),
    help="Response encoding to offer; repeat in preference order.",
)
@click.option(
    "--log-level",
    default="INFO",
    envvar="HAKOBI_LOG_LEVEL",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
def main(directory: str, host: str, port: int, encodings: tuple[str, ...], log_level: str) -> None:
    """Serve echo, user-agent and file endpoints over HTTP/1.1."""
    try:
        config = ServerConfig(
            host=host,
            port=port,
            directory=directory,
            encodings=encodings,
            log_level=log_level,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    setup_logging(config.log_level)

    try:
        asyncio.run(Server(config).serve_forever())
    except OSError as exc:
        click.secho(f"Failed to bind to {host}:{port}: {exc}", fg="red", err=True)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        click.secho("Shutting down", fg="yellow", err=True)

#!/usr/bin/env python3
"""
Upload a file to an in-process hakobi server and fetch it back,
once plain and once gzip-compressed.
"""

import asyncio
import gzip
import tempfile

import click

from hakobi import Server, ServerConfig


async def send(port: int, raw: bytes) -> bytes:
    reader, writer = await asyncio.open_connection("127.0.0.1", port)
    writer.write(raw)
    await writer.drain()
    data = await reader.read()
    writer.close()
    await writer.wait_closed()
    return data


async def main() -> None:
    with tempfile.TemporaryDirectory() as directory:
        config = ServerConfig(host="127.0.0.1", port=0, directory=directory)
        async with Server(config) as server:
            body = b"hello from hakobi"
            created = await send(
                server.port,
                b"POST /files/note.txt HTTP/1.1\r\n"
                + f"Content-Length: {len(body)}\r\n\r\n".encode()
                + body,
            )
            click.secho(f"POST: {created.splitlines()[0].decode()}", fg="green")

            plain = await send(server.port, b"GET /files/note.txt HTTP/1.1\r\n\r\n")
            content = plain.split(b"\r\n\r\n", 1)[1]
            click.secho(f"GET: {content!r}", fg="blue")

            packed = await send(
                server.port,
                b"GET /files/note.txt HTTP/1.1\r\nAccept-Encoding: gzip\r\n\r\n",
            )
            compressed = packed.split(b"\r\n\r\n", 1)[1]
            click.secho(
                f"GET gzip: {len(compressed)} bytes -> {gzip.decompress(compressed)!r}",
                fg="magenta",
            )


if __name__ == "__main__":
    asyncio.run(main())

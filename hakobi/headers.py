from __future__ import annotations

from collections.abc import Iterable

# Response headers are always emitted in this order.
RESPONSE_HEADER_ORDER = ("Content-Type", "Content-Length", "Content-Encoding")

HEADER_WHITESPACE = b" \t\r\n"


def _sanitize_header(name: str, value: str) -> tuple[str, str]:
    """
    Sanitize header name and value to prevent HTTP header injection (CRLF injection).
    Strips CR, LF, and null bytes from both name and value.
    """
    clean_name = name.replace("\r", "").replace("\n", "").replace("\x00", "")
    clean_value = value.replace("\r", "").replace("\n", "").replace("\x00", "")
    return clean_name, clean_value


def parse_header_line(line: bytes) -> tuple[str, str] | None:
    """
    Split a raw header line on its first colon into a lower-cased name and a
    trimmed value. Only ASCII whitespace is trimmed, so non-ASCII bytes in
    values pass through untouched. Lines without a colon yield None.
    """
    name, sep, value = line.partition(b":")
    if not sep:
        return None
    return (
        name.strip(HEADER_WHITESPACE).lower().decode("latin-1"),
        value.strip(HEADER_WHITESPACE).decode("latin-1"),
    )


def order_headers(
    headers: dict[str, str],
    order: Iterable[str] = RESPONSE_HEADER_ORDER,
) -> list[tuple[str, str]]:
    """
    Sanitize response headers and arrange them in a deterministic order.
    Headers missing from ``order`` follow in insertion order.
    """
    merged: dict[str, tuple[str, str]] = {}
    for name, value in headers.items():
        name, value = _sanitize_header(name, value)
        merged[name.lower()] = (name, value)

    ordered: list[tuple[str, str]] = []
    for name in order:
        key = name.lower()
        if key in merged:
            ordered.append(merged.pop(key))
    ordered.extend(merged.values())
    return ordered

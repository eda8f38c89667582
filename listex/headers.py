"""Parsing of raw HTTP response header blocks."""

from __future__ import annotations

from typing import AnyStr

_TRIM_CHARS = " \t\"'"


def parse_headers(block: str) -> dict[str, str]:
    """Parse a CRLF-separated header block into a flat mapping.

    Lines without a colon (the status line, the blank terminator) are
    skipped. Keys lose their hyphens (``Retry-After`` becomes
    ``RetryAfter``); values are trimmed of whitespace and quote characters.
    A repeated header keeps its last value.
    """
    headers: dict[str, str] = {}
    for line in block.split("\r\n"):
        if ":" not in line:
            continue
        key = line.split(":", 1)[0]
        value = line.replace(f"{key}:", "", 1).strip(_TRIM_CHARS)
        headers[key.replace("-", "")] = value
    return headers


def split_raw_response(raw: AnyStr, header_size: int) -> tuple[AnyStr, AnyStr]:
    """Split a raw response into ``(header_block, body)`` at *header_size*.

    Works on bytes as received from the transport, or on text.
    """
    header = raw[:header_size]
    body = raw[:0] if len(raw) == header_size else raw[header_size:]
    return header, body

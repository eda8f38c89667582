from __future__ import annotations

from typing import Any, Mapping

import pytest

from listex.client import ListexClient
from listex.transport import TransportResponse


def raw_response(
    status: int = 200,
    body: str | bytes = "",
    headers: Mapping[str, str] | None = None,
) -> TransportResponse:
    """Assemble a transport result the way a real HTTP stack reports it."""
    lines = [f"HTTP/1.1 {status}"]
    lines.extend(f"{k}: {v}" for k, v in (headers or {}).items())
    block = ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1")
    if isinstance(body, str):
        body = body.encode("utf-8")
    return TransportResponse(status=status, raw=block + body, header_size=len(block))


class FakeTransport:
    """Records every send and replies with queued responses."""

    def __init__(self, *responses: TransportResponse | Exception) -> None:
        self.responses = list(responses) or [raw_response()]
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def send(self, method, url, *, params, headers, content=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": dict(params),
                "headers": dict(headers),
                "content": content,
            }
        )
        reply = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def client(fake_transport):
    with ListexClient("test-key", transport=fake_transport) as c:
        yield c


@pytest.fixture
def make_raw():
    return raw_response


@pytest.fixture
def make_transport():
    return FakeTransport

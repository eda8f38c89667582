"""HTTP transport boundary used by :class:`listex.client.ListexClient`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

import httpx

from listex.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Final status plus the raw response bytes (header block, then body)."""

    status: int
    raw: bytes
    header_size: int


class Transport(Protocol):
    def send(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...


def _header_block(response: httpx.Response) -> str:
    """Rebuild the raw header block httpx has already parsed."""
    reason = response.reason_phrase or ""
    lines = [f"{response.http_version} {response.status_code} {reason}".rstrip()]
    for name, value in response.headers.raw:
        lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}")
    return "\r\n".join(lines) + "\r\n\r\n"


class HttpxTransport:
    """Transport backed by ``httpx.Client``."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers: dict[str, str] = {}
        if user_agent is not None:
            headers["User-Agent"] = user_agent
        kwargs: dict[str, Any] = {"headers": headers, "timeout": timeout}
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.Client(**kwargs)

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> TransportResponse:
        try:
            resp = self._client.request(
                method, url, params=params, headers=headers, content=content,
            )
        except httpx.HTTPError as exc:
            logger.warning("Transport failure for %s %s: %s", method, url, exc)
            raise TransportError(type(exc).__name__, str(exc)) from exc
        header = _header_block(resp).encode("latin-1")
        return TransportResponse(
            status=resp.status_code,
            raw=header + resp.content,
            header_size=len(header),
        )

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

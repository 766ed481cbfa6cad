"""Concrete transport implementation using httpx (injected where Transport is needed)."""
from __future__ import annotations

import httpx

from netlayer.app.constants import DEFAULT_TIMEOUT_SECONDS
from netlayer.app.domain.models import WireRequest
from netlayer.app.ports.transport import (
    HttpResponse,
    Transport,
    TransportError,
    TransportTimeoutError,
)

DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the HttpResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._response.headers)

    @property
    def content(self) -> bytes:
        return self._response.content


class HttpxTransport(Transport):
    """Transport implementation using httpx.AsyncClient.

    The per-request timeout comes from the WireRequest; connect timeout is fixed
    at construction.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
        follow_redirects: bool = True,
    ) -> None:
        self._client = client
        self._connect_timeout_seconds = connect_timeout_seconds
        self._follow_redirects = follow_redirects

    @classmethod
    def with_defaults(cls) -> HttpxTransport:
        return cls(httpx.AsyncClient())

    async def send(self, request: WireRequest) -> HttpResponse:
        read_seconds = request.timeout_seconds or DEFAULT_TIMEOUT_SECONDS
        httpx_timeout = httpx.Timeout(
            connect=self._connect_timeout_seconds,
            read=read_seconds,
            write=read_seconds,
            pool=self._connect_timeout_seconds,
        )
        try:
            response = await self._client.request(
                request.method.value,
                request.url,
                content=request.body,
                headers=request.headers,
                timeout=httpx_timeout,
                follow_redirects=self._follow_redirects,
            )
            return _HttpxResponseAdapter(response)
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"timeout while sending {request.method.value} {request.url}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"http exchange failed for {request.url}: {exc}") from exc

    async def close(self) -> None:
        await self._client.aclose()

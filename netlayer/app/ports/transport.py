"""Transport port: contract for sending a fully built request.

Clients depend on this port; infrastructure (e.g. httpx) implements it.
Keeps the dispatch pipeline free of socket-level imports.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from netlayer.app.domain.models import WireRequest


class TransportError(Exception):
    """Base for transport failures (connection, protocol, etc.)."""


class TransportTimeoutError(TransportError):
    """Raised when the exchange times out."""


@runtime_checkable
class HttpResponse(Protocol):
    """Minimal read-only view of an HTTP response."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def content(self) -> bytes: ...


@runtime_checkable
class Transport(Protocol):
    """Port: perform one HTTP exchange. Implementations live in infrastructure."""

    async def send(self, request: WireRequest) -> HttpResponse:
        """Send the request; raise TransportTimeoutError or TransportError on failure.

        Task cancellation must propagate as asyncio.CancelledError.
        """
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...

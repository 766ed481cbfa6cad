"""Transport factory: selects the Transport implementation from settings."""
from __future__ import annotations

import httpx

from netlayer.app.config.settings import Settings
from netlayer.app.constants import TransportBackend
from netlayer.app.ports.transport import Transport
from netlayer.app.infrastructure.http.httpx_transport import HttpxTransport
from netlayer.app.infrastructure.http.inmemory.stub_transport import InMemoryTransport


def create_transport(settings: Settings) -> Transport:
    """Build a transport from settings. Read timeouts are applied per request by the adapter."""
    backend = settings.transport_backend.strip().lower()

    if backend == TransportBackend.HTTPX:
        return HttpxTransport(
            httpx.AsyncClient(),
            connect_timeout_seconds=settings.connect_timeout_seconds,
            follow_redirects=settings.follow_redirects,
        )

    if backend == TransportBackend.INMEMORY:
        return InMemoryTransport()

    raise ValueError(f"Unsupported transport backend: {backend}")

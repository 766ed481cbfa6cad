"""In-memory transport for local mode and tests.

Answers from canned responses keyed by (method, path); no network involved.
Unregistered routes answer 404 with an empty body.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

from netlayer.app.constants import HttpMethod
from netlayer.app.domain.models import WireRequest
from netlayer.app.ports.transport import Transport


@dataclass(frozen=True)
class StubResponse:
    """Canned response; satisfies the HttpResponse protocol."""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_json(status_code: int, payload: Any, headers: dict[str, str] | None = None) -> "StubResponse":
        return StubResponse(
            status_code=status_code,
            content=json.dumps(payload, separators=(",", ":")).encode("utf-8"),
            headers={"Content-Type": "application/json", **(headers or {})},
        )


class InMemoryTransport(Transport):
    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], StubResponse] = {}
        self.requests: list[WireRequest] = []

    def register(self, method: HttpMethod, path: str, response: StubResponse) -> None:
        self._routes[(method.value, path)] = response

    async def send(self, request: WireRequest) -> StubResponse:
        self.requests.append(request)
        path = urlsplit(request.url).path
        return self._routes.get((request.method.value, path), StubResponse(status_code=404))

    async def close(self) -> None:
        return

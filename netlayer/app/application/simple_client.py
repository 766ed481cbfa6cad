"""SimpleClient: value-or-raise facade over Client[NoErrorModel].

Never decodes error bodies itself. Returns the decoded model, or None when the
call was cancelled or the host answered 204 No Content.
"""
from __future__ import annotations

import asyncio
from typing import Any

from netlayer.app.application.cancellation import none_on_cancel
from netlayer.app.application.client import Client
from netlayer.app.domain.errors import ExpectedErrorSurfaced
from netlayer.app.domain.models import Failure, NoErrorModel, Success
from netlayer.app.domain.request import ApiRequest
from netlayer.app.domain.session import DefaultSession
from netlayer.app.ports.request_builder import RequestBuilder
from netlayer.app.ports.session import Session
from netlayer.app.ports.transport import Transport


class SimpleClient:
    def __init__(
        self,
        session: Session,
        transport: Transport | None = None,
        request_builder: RequestBuilder | None = None,
    ) -> None:
        self._client: Client[NoErrorModel] = Client(
            session,
            transport,
            request_builder,
            error_model=NoErrorModel,
        )

    @classmethod
    def from_host(cls, host: str, transport: Transport | None = None) -> SimpleClient:
        """Create a client with a fresh DefaultSession for ``host``."""
        return cls(DefaultSession(host), transport)

    @property
    def session(self) -> Session:
        return self._client.session

    @none_on_cancel
    async def send(self, request: ApiRequest, *, cancel_event: asyncio.Event | None = None) -> Any | None:
        envelope = await self._client.send(request, cancel_event=cancel_event)
        if envelope is None:
            return None

        result = envelope.result
        if isinstance(result, Success):
            return result.model
        if isinstance(result, Failure):
            raise ExpectedErrorSurfaced(result.error)
        return None

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> SimpleClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

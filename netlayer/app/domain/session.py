"""Default session: host plus mutable default headers and query parameters.

Every read and write goes through one asyncio.Lock, so concurrent dispatches
never observe a half-applied update. Reads hand out copies.
"""
from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from netlayer.app.core import SERVICE_NAME
from netlayer.app.domain.models import SessionSnapshot
from netlayer.app.ports.session import Session


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class DefaultSession(Session):
    """Session implementation guarded by a single lock."""

    def __init__(self, host: str) -> None:
        self._host = host
        self._headers: dict[str, str] = {}
        self._query_params: dict[str, str] = {}
        self._lock = asyncio.Lock()

    @property
    def host(self) -> str:
        return self._host

    async def set_header(self, key: str, value: str) -> None:
        async with self._lock:
            self._headers[key] = value
        _log("session_header_set", header=key)

    async def remove_header(self, key: str) -> None:
        lowered = key.lower()
        async with self._lock:
            self._headers = {k: v for k, v in self._headers.items() if k.lower() != lowered}
        _log("session_header_removed", header=key)

    async def set_query_param(self, key: str, value: object) -> None:
        async with self._lock:
            self._query_params[key] = str(value)
        _log("session_query_param_set", param=key)

    async def remove_query_param(self, key: str) -> None:
        async with self._lock:
            self._query_params = {k: v for k, v in self._query_params.items() if k != key}
        _log("session_query_param_removed", param=key)

    async def headers(self) -> dict[str, str]:
        async with self._lock:
            return dict(self._headers)

    async def query_params(self) -> dict[str, str]:
        async with self._lock:
            return dict(self._query_params)

    async def snapshot(self) -> SessionSnapshot:
        async with self._lock:
            return SessionSnapshot(
                host=self._host,
                headers=dict(self._headers),
                query_params=dict(self._query_params),
            )

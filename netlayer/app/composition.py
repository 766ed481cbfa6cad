"""Composition root: build and lifecycle-manage concrete dependencies.

Composition may: import concrete classes, call factories, store interface types,
manage high-level lifecycle.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from netlayer.app.application.client import Client
from netlayer.app.application.simple_client import SimpleClient
from netlayer.app.config.settings import Settings
from netlayer.app.core import SERVICE_NAME, configure_logging
from netlayer.app.domain.models import ErrorT
from netlayer.app.domain.request_builder import DefaultRequestBuilder
from netlayer.app.domain.session import DefaultSession
from netlayer.app.infrastructure.http.factory import create_transport
from netlayer.app.ports.session import Session
from netlayer.app.ports.transport import Transport


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ClientDependencies:
    """Holds the wired session, transport and builder and their lifecycle.

    Clients handed out share the session and transport; closing the
    dependencies closes the transport for all of them.
    """

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._session: Session | None = None
        self._transport: Transport | None = None
        self._request_builder: DefaultRequestBuilder | None = None
        self._connected = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("session is not initialized")
        return self._session

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            raise RuntimeError("transport is not initialized")
        return self._transport

    async def connect(self) -> None:
        configure_logging(self._settings.log_level)

        self._session = DefaultSession(self._settings.api_host)
        if self._settings.default_user_agent:
            await self._session.set_header("User-Agent", self._settings.default_user_agent)

        self._transport = create_transport(self._settings)
        self._request_builder = DefaultRequestBuilder(
            timeout_seconds=self._settings.request_timeout_seconds,
        )
        self._connected = True
        _log(
            "dependencies_connected",
            host=self._settings.api_host,
            transport_backend=self._settings.transport_backend,
        )

    def client(self, error_model: type[ErrorT] | None = None) -> Client[Any]:
        """Return a Client sharing this session and transport."""
        if error_model is None:
            return Client(self.session, self.transport, self._request_builder)
        return Client(self.session, self.transport, self._request_builder, error_model=error_model)

    def simple_client(self) -> SimpleClient:
        return SimpleClient(self.session, self.transport, self._request_builder)

    async def close(self) -> None:
        if self._transport is not None:
            try:
                await self._transport.close()
            except Exception as exc:
                logger.warning("transport close failed: {}", exc)
            self._transport = None

        self._session = None
        self._request_builder = None
        self._connected = False
        _log("dependencies_closed")

    async def __aenter__(self) -> ClientDependencies:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def create_client_dependencies(settings: Settings | None = None) -> ClientDependencies:
    return ClientDependencies(settings=settings or Settings())

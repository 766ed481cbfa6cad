"""Client: builds, sends and interprets one API call.

There are four outcomes of ``send``:

1. status 200 and the body validates as the request's ``response_model``:
   an envelope with ``model`` set;
2. any other status and the body validates as the client's error model:
   an envelope with ``error`` set and the actual status code;
3. the call was cancelled before the response was interpreted: ``None``;
4. anything else raises (see ``netlayer.app.domain.errors``).

204 No Content yields an envelope with neither ``model`` nor ``error``. A 200
body that decodes to ``None`` (``null``) raises ``NoDataError``.
"""
from __future__ import annotations

import asyncio
from functools import lru_cache
from typing import Any, Generic

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from netlayer.app.application.cancellation import none_on_cancel
from netlayer.app.constants import HTTP_NO_CONTENT, HTTP_OK
from netlayer.app.core import SERVICE_NAME
from netlayer.app.domain.errors import InvalidResponseCodeError, NoDataError, ResponseTypeError
from netlayer.app.domain.models import ErrorT, NoErrorModel, ResponseEnvelope
from netlayer.app.domain.request import ApiRequest
from netlayer.app.domain.request_builder import DefaultRequestBuilder
from netlayer.app.ports.request_builder import RequestBuilder
from netlayer.app.ports.session import Session
from netlayer.app.ports.transport import HttpResponse, Transport


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _body_text(content: bytes) -> str | None:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return None


async def _checkpoint(cancel_event: asyncio.Event | None) -> None:
    """Single cancellation check after the transport returns.

    Yielding once delivers a task cancellation requested while the response
    was already being handed back.
    """
    await asyncio.sleep(0)
    if cancel_event is not None and cancel_event.is_set():
        raise asyncio.CancelledError()


class Client(Generic[ErrorT]):
    """Dispatches ApiRequests through an injectable Transport.

    ``error_model`` is the expected error body shape; leave it as
    ``NoErrorModel`` to treat every non-200/204 status as a failure.
    """

    def __init__(
        self,
        session: Session,
        transport: Transport | None = None,
        request_builder: RequestBuilder | None = None,
        *,
        error_model: type[ErrorT] = NoErrorModel,  # type: ignore[assignment]
    ) -> None:
        self._session = session
        self._owns_transport = transport is None
        if transport is None:
            from netlayer.app.infrastructure.http.httpx_transport import HttpxTransport

            transport = HttpxTransport.with_defaults()
        self._transport = transport
        self._request_builder = request_builder or DefaultRequestBuilder()
        self._error_model = error_model

    @property
    def session(self) -> Session:
        return self._session

    @property
    def error_model(self) -> type[ErrorT]:
        return self._error_model

    @none_on_cancel
    async def send(
        self,
        request: ApiRequest,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> ResponseEnvelope[Any, ErrorT] | None:
        try:
            snapshot = await self._session.snapshot()
            wire_request = self._request_builder.build(request, snapshot)
            _log("request_sent", method=wire_request.method.value, url=wire_request.url)
            response = await self._transport.send(wire_request)
            await _checkpoint(cancel_event)
        except asyncio.CancelledError:
            _log("request_cancelled", request=type(request).__name__)
            return None

        if not isinstance(response, HttpResponse):
            raise ResponseTypeError(response)

        code = int(response.status_code)
        headers = dict(response.headers)
        content = bytes(response.content or b"")
        _log("response_received", url=wire_request.url, status_code=code, length=len(content))

        if code == HTTP_NO_CONTENT:
            return ResponseEnvelope(model=None, error=None, code=code, headers=headers)

        if not content:
            raise NoDataError(code)

        if code == HTTP_OK:
            try:
                model = _adapter(type(request).response_model).validate_json(content)
            except ValidationError as exc:
                _log("response_decode_failed", url=wire_request.url, status_code=code, errors=exc.error_count())
                raise
            if model is None:
                raise NoDataError(code)
            envelope: ResponseEnvelope[Any, ErrorT] = ResponseEnvelope(
                model=model, error=None, code=code, headers=headers
            )
            logger.debug("decoded response: {}", envelope.to_dict())
            return envelope

        error = self._decode_error(content)
        if error is None:
            raise InvalidResponseCodeError(code, _body_text(content))

        _log("expected_error_decoded", url=wire_request.url, status_code=code)
        return ResponseEnvelope(model=None, error=error, code=code, headers=headers)

    def _decode_error(self, content: bytes) -> ErrorT | None:
        if self._error_model is NoErrorModel:
            return None
        try:
            return _adapter(self._error_model).validate_json(content)
        except (ValidationError, UnicodeDecodeError):
            return None

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()
            _log("transport_closed")

    async def __aenter__(self) -> Client[ErrorT]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

"""Unit tests for SimpleClient: value-or-raise collapse over Client[NoErrorModel]."""
from __future__ import annotations

import asyncio

import pytest

from netlayer.app.application.simple_client import SimpleClient
from netlayer.app.domain.errors import ExpectedErrorSurfaced, InvalidResponseCodeError
from netlayer.app.domain.models import ResponseEnvelope
from netlayer.app.domain.session import DefaultSession
from netlayer.app.ports.transport import TransportError
from tests.mocks import FakeTransport, MockErrorResponse, MockResponse, SimpleMockRequest


@pytest.mark.asyncio
async def test_successful(session, put_request):
    transport = FakeTransport(status_code=200, payload=MockResponse(count=44))
    client = SimpleClient(session, transport)

    response = await client.send(put_request)

    assert response == MockResponse(count=44)


@pytest.mark.asyncio
async def test_unexpected_error(session, put_request):
    transport = FakeTransport(status_code=503, payload=MockResponse(count=44))
    client = SimpleClient(session, transport)

    with pytest.raises(InvalidResponseCodeError) as exc_info:
        await client.send(put_request)

    assert exc_info.value.code == 503


@pytest.mark.asyncio
async def test_error_shaped_body_is_not_decoded(session, put_request):
    transport = FakeTransport(status_code=422, payload=MockErrorResponse(message="bad", code=9))
    client = SimpleClient(session, transport)

    with pytest.raises(InvalidResponseCodeError) as exc_info:
        await client.send(put_request)

    assert exc_info.value.body == '{"message":"bad","code":9}'


@pytest.mark.asyncio
async def test_http_no_content(session, put_request):
    transport = FakeTransport(status_code=204)
    client = SimpleClient(session, transport)

    assert await client.send(put_request) is None


@pytest.mark.asyncio
async def test_transport_failure_propagates(session, put_request):
    transport = FakeTransport(raise_on_send=TransportError("down"))
    client = SimpleClient(session, transport)

    with pytest.raises(TransportError):
        await client.send(put_request)


@pytest.mark.asyncio
async def test_cancellation(session, put_request):
    transport = FakeTransport(status_code=200, payload=MockResponse(count=44), delay=2.0)
    client = SimpleClient(session, transport)

    task = asyncio.create_task(client.send(put_request))
    await asyncio.sleep(0.1)
    task.cancel()

    result = await asyncio.wait_for(task, timeout=1.0)

    assert result is None


@pytest.mark.asyncio
async def test_error_envelope_is_raised_as_expected_error(session, put_request, monkeypatch):
    client = SimpleClient(session, FakeTransport())
    error = MockErrorResponse(message="lol", code=123)

    async def _send(request, *, cancel_event=None):
        return ResponseEnvelope(model=None, error=error, code=400)

    monkeypatch.setattr(client._client, "send", _send)

    with pytest.raises(ExpectedErrorSurfaced) as exc_info:
        await client.send(put_request)

    assert exc_info.value.model is error


@pytest.mark.asyncio
async def test_from_host_creates_default_session():
    transport = FakeTransport(status_code=200, payload={"count": 1})
    client = SimpleClient.from_host("example.com", transport)

    assert isinstance(client.session, DefaultSession)
    assert client.session.host == "example.com"

    await client.session.set_query_param("apiKey", "1234")
    await client.send(SimpleMockRequest(value=5, route="/some/path"))

    assert transport.requests[0].url == "https://example.com/some/path?a_value=5&apiKey=1234"


@pytest.mark.asyncio
async def test_session_mutation_is_visible_on_next_call(put_request):
    transport = FakeTransport(status_code=200, payload={"count": 1})
    client = SimpleClient.from_host("https://api.example.com", transport)

    await client.send(put_request)
    await client.session.set_header("Authentication", "Bearer jwt")
    await client.send(put_request)

    assert "Authentication" not in transport.requests[0].headers
    assert transport.requests[1].headers["Authentication"] == "Bearer jwt"


@pytest.mark.asyncio
async def test_cancellation_before_first_step(session, put_request):
    transport = FakeTransport(status_code=200, payload=MockResponse(count=44))
    client = SimpleClient(session, transport)

    task = asyncio.create_task(client.send(put_request))
    task.cancel()

    assert await task is None
    assert transport.requests == []

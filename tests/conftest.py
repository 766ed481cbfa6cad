from __future__ import annotations

import pytest

from netlayer.app.constants import HttpMethod
from netlayer.app.domain.session import DefaultSession
from tests.mocks import FakeTransport, SimpleMockRequest


@pytest.fixture()
def session() -> DefaultSession:
    return DefaultSession("https://www.foo.bar")


@pytest.fixture()
def put_request() -> SimpleMockRequest:
    return SimpleMockRequest(value=42, http_method=HttpMethod.PUT, route="/none")


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport(status_code=200)

"""Port: turns a request descriptor plus session state into a wire request."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from netlayer.app.domain.models import SessionSnapshot, WireRequest
    from netlayer.app.domain.request import ApiRequest


class RequestBuilder(Protocol):
    def build(self, request: ApiRequest, snapshot: SessionSnapshot) -> WireRequest: ...

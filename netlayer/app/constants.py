"""Constants shared across the request pipeline."""
from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# Methods whose payload is sent as the JSON body; the rest encode it as query items.
BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT})
QUERY_METHODS = frozenset({HttpMethod.GET, HttpMethod.DELETE})

HTTP_OK = 200
HTTP_NO_CONTENT = 204

DEFAULT_SCHEME = "https"
DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}
DEFAULT_TIMEOUT_SECONDS = 60.0


class TransportBackend:
    HTTPX = "httpx"
    INMEMORY = "inmemory"

"""Request builder: combines a descriptor and a session snapshot into a WireRequest.

Pure and synchronous; the caller takes the snapshot. Precedence rules:

* path: joined onto the raw host string so the join point never doubles a slash;
* query: descriptor items (GET/DELETE only) first, then session defaults;
* headers: Content-Type default < session headers < descriptor headers.
"""
from __future__ import annotations

from typing import Any
from urllib.parse import SplitResult, quote, urlencode, urlsplit, urlunsplit

from loguru import logger

from netlayer.app.constants import (
    BODY_METHODS,
    DEFAULT_HEADERS,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT_SECONDS,
    QUERY_METHODS,
)
from netlayer.app.core import SERVICE_NAME
from netlayer.app.domain.encoding import as_body, as_query_items
from netlayer.app.domain.errors import UrlComponentsError, UrlCreationError
from netlayer.app.domain.models import SessionSnapshot, WireRequest
from netlayer.app.domain.request import ApiRequest
from netlayer.app.ports.request_builder import RequestBuilder

# RFC 3986 pchar plus "/" and "%" so pre-encoded paths pass through untouched.
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def join_path(host: str, path: str) -> str:
    """Return the path suffix to append to ``host``'s own path."""
    if not host.endswith("/") and not path.startswith("/"):
        return "/" + path
    if host.endswith("/"):
        return path.lstrip("/")
    return path


def parse_host(host: str) -> SplitResult:
    """Split ``host`` into URL components, defaulting the scheme to https."""
    candidate = host.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        raise UrlComponentsError(host)
    if candidate.startswith("//"):
        candidate = f"{DEFAULT_SCHEME}:{candidate}"
    elif "://" not in candidate:
        candidate = f"{DEFAULT_SCHEME}://{candidate}"
    try:
        components = urlsplit(candidate)
    except ValueError as exc:
        raise UrlComponentsError(host) from exc
    if not components.scheme:
        components = components._replace(scheme=DEFAULT_SCHEME)
    return components


class DefaultRequestBuilder(RequestBuilder):
    """Builds WireRequests; holds only immutable configuration."""

    def __init__(self, *, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout_seconds = float(timeout_seconds)

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def build(self, request: ApiRequest, snapshot: SessionSnapshot) -> WireRequest:
        method = request.method()
        url = self._create_url(request, snapshot)
        body = as_body(request) if method in BODY_METHODS else None
        headers = self._create_headers(request, snapshot)
        _log("request_built", method=method.value, url=url, has_body=body is not None)
        return WireRequest(
            method=method,
            url=url,
            headers=headers,
            body=body,
            timeout_seconds=self._timeout_seconds,
        )

    def _create_url(self, request: ApiRequest, snapshot: SessionSnapshot) -> str:
        components = parse_host(snapshot.host)
        path = components.path + join_path(snapshot.host, request.path())
        path = quote(path, safe=_PATH_SAFE)
        query = urlencode(self._create_query_items(request, snapshot), quote_via=quote)

        try:
            valid = bool(components.netloc) and components.hostname is not None
            # Accessing .port validates it.
            components.port
        except ValueError:
            valid = False
        if not valid:
            raise UrlCreationError(path)

        return urlunsplit((components.scheme, components.netloc, path, query, ""))

    def _create_query_items(self, request: ApiRequest, snapshot: SessionSnapshot) -> list[tuple[str, str]]:
        items: list[tuple[str, str]] = []
        if request.method() in QUERY_METHODS:
            items += as_query_items(request)
        items += list(snapshot.query_params.items())
        return items

    def _create_headers(self, request: ApiRequest, snapshot: SessionSnapshot) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        headers.update(snapshot.headers)
        headers.update(request.headers() or {})
        return headers

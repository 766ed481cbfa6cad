"""Errors raised while building requests and interpreting responses."""
from __future__ import annotations

from typing import Any


class NetLayerError(Exception):
    """Base error for request building and response interpretation failures."""


class TypeMismatchError(NetLayerError):
    """Raised when a request payload does not encode to a flat mapping."""

    def __init__(self, actual: Any) -> None:
        self.actual = actual
        super().__init__(f"request payload must encode to a mapping, got {type(actual).__name__}")


class UrlComponentsError(NetLayerError):
    """Raised when the session host cannot be parsed into URL components."""

    def __init__(self, host: str) -> None:
        self.host = host
        super().__init__(f"unable to parse host into url components: {host!r}")


class UrlCreationError(NetLayerError):
    """Raised when the composed components do not form a valid URL."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"unable to create url for path {path!r}")


class ResponseTypeError(NetLayerError):
    """Raised when the transport returns something that is not an HTTP response."""

    def __init__(self, response: Any) -> None:
        self.response = response
        super().__init__(f"transport returned a non-http response: {type(response).__name__}")


class NoDataError(NetLayerError):
    """Raised when a response other than 204 carries no body, or a 200 body is ``null``."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"no data returned from host (status {code})")


class InvalidResponseCodeError(NetLayerError):
    """Raised for a status other than 200/204 whose body is not an expected error."""

    def __init__(self, code: int, body: str | None) -> None:
        self.code = code
        self.body = body
        super().__init__(f"unexpected response code {code}")


class ExpectedErrorSurfaced(NetLayerError):
    """Raised by SimpleClient when the host answered with a decoded error model."""

    def __init__(self, model: Any) -> None:
        self.model = model
        super().__init__(f"host returned an expected error: {model!r}")

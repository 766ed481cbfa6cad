"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from netlayer.app.constants import DEFAULT_TIMEOUT_SECONDS, HTTP_NO_CONTENT, HttpMethod

ModelT = TypeVar("ModelT")
ErrorT = TypeVar("ErrorT")


class NoErrorModel(BaseModel):
    """Error type placeholder for clients that never decode error bodies.

    The dispatcher checks for this type and skips the decode attempt, so no
    instance is ever produced from a response.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


@dataclass(frozen=True)
class SessionSnapshot:
    """Consistent view of a session taken under its lock."""

    host: str
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class WireRequest:
    """Fully built request handed to a transport (value object)."""

    method: HttpMethod
    url: str
    headers: dict[str, str]
    body: bytes | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class Success(Generic[ModelT]):
    model: ModelT


@dataclass(frozen=True)
class Failure(Generic[ErrorT]):
    error: ErrorT


@dataclass(frozen=True)
class ResponseEnvelope(Generic[ModelT, ErrorT]):
    """Interpreted response: a success model, an expected error model, or neither.

    ``model`` and ``error`` are mutually exclusive; both are absent only for
    204 No Content.
    """

    model: ModelT | None
    error: ErrorT | None
    code: int
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.model is not None and self.error is not None:
            raise ValueError("envelope cannot hold both a model and an error")
        if self.model is None and self.error is None and self.code != HTTP_NO_CONTENT:
            raise ValueError(f"empty envelope is only valid for status {HTTP_NO_CONTENT}, got {self.code}")

    @property
    def result(self) -> Union[Success[ModelT], Failure[ErrorT], None]:
        if self.model is not None:
            return Success(self.model)
        if self.error is not None:
            return Failure(self.error)
        return None

    def to_dict(self) -> dict[str, Any]:
        """Loggable summary; models are dumped when they are pydantic models."""
        return {
            "code": int(self.code),
            "model": _dump(self.model),
            "error": _dump(self.error),
            "headers": dict(self.headers),
        }


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value

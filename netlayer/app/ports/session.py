"""Port: shared connection configuration read by every dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from netlayer.app.domain.models import SessionSnapshot


class Session(Protocol):
    """Host, default headers and default query parameters for one connection target."""

    @property
    def host(self) -> str: ...

    async def set_header(self, key: str, value: str) -> None: ...

    async def remove_header(self, key: str) -> None:
        """Remove every header whose key matches ``key`` case-insensitively."""
        ...

    async def set_query_param(self, key: str, value: object) -> None: ...

    async def remove_query_param(self, key: str) -> None: ...

    async def headers(self) -> dict[str, str]: ...

    async def query_params(self) -> dict[str, str]: ...

    async def snapshot(self) -> SessionSnapshot: ...

"""Turn task cancellation into a ``None`` result for dispatch coroutines.

A task cancelled before its first step never enters the coroutine body, so an
``except asyncio.CancelledError`` inside ``send`` cannot see it. ``none_on_cancel``
wraps the coroutine object so that case also completes with ``None``; once the
body is running, the body's own handler applies.
"""
from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable, Coroutine
from typing import Any, Generator, TypeVar

T = TypeVar("T")


class _NoneOnCancel(Coroutine):
    def __init__(self, coro: Coroutine[Any, Any, T]) -> None:
        self._coro = coro
        self._started = False

    def __await__(self) -> Generator[Any, None, T | None]:
        return self  # type: ignore[return-value]

    def __iter__(self) -> _NoneOnCancel:
        return self

    def __next__(self) -> Any:
        return self.send(None)

    def send(self, value: Any) -> Any:
        self._started = True
        return self._coro.send(value)

    def throw(self, typ: Any, val: Any = None, tb: Any = None) -> Any:
        exc = typ if val is None else val
        if isinstance(exc, type):
            exc = exc()
        if tb is not None:
            exc = exc.with_traceback(tb)
        if not self._started and isinstance(exc, asyncio.CancelledError):
            self._coro.close()
            raise StopIteration(None)
        self._started = True
        return self._coro.throw(exc)

    def close(self) -> None:
        self._coro.close()


def none_on_cancel(
    func: Callable[..., Coroutine[Any, Any, T]],
) -> Callable[..., Coroutine[Any, Any, T | None]]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Coroutine[Any, Any, T | None]:
        return _NoneOnCancel(func(*args, **kwargs))

    return wrapper

"""Payload encoding for request descriptors.

Query items keep the field declaration order of the descriptor. Nested values
(objects, lists) are not flattened into several parameters; they travel as one
compact JSON string.
"""
from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from netlayer.app.domain.errors import TypeMismatchError


def as_dict(payload: BaseModel) -> dict[str, Any]:
    """Dump the payload to a JSON-compatible mapping, dropping unset optionals."""
    dumped = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not isinstance(dumped, dict):
        raise TypeMismatchError(dumped)
    return dumped


def as_query_items(payload: BaseModel) -> list[tuple[str, str]]:
    return [(str(key), _query_value(value)) for key, value in as_dict(payload).items()]


def as_body(payload: BaseModel) -> bytes:
    return payload.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def _query_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

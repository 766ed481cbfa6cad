"""Request descriptors: one pydantic model subclass per API call.

The model's encodable fields are the payload. For GET/DELETE they become query
items, for POST/PUT the JSON body. Fields declared with ``Field(exclude=True)``
(ids embedded in the path, routing hints) are never encoded. Aliases rename the
wire keys::

    class UserRequest(ApiRequest):
        response_model: ClassVar[type] = User

        user_id: int = Field(exclude=True)
        include_posts: bool = Field(False, alias="include_posts")

        def path(self) -> str:
            return f"/users/{self.user_id}"
"""
from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from netlayer.app.constants import HttpMethod


class ApiRequest(BaseModel):
    """Base descriptor. Subclasses set ``response_model`` and implement ``path()``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Any type pydantic can validate: a model, list[Model], dict[str, int], ...
    # A 200 body that validates to None raises NoDataError.
    response_model: ClassVar[Any] = None

    def method(self) -> HttpMethod:
        return HttpMethod.GET

    def path(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement path()")

    def headers(self) -> dict[str, str] | None:
        """Headers for this request only. Override to add them."""
        return None

"""
Request and response envelope descriptions.
"""

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import Field

from ...exceptions import ValidationError
from ..base import ApiModel

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class ApiRequest(ApiModel):
    """A single call to the Jira REST API, relative to ``/rest/api/2``."""

    path: str
    method: HttpMethod = "GET"
    body: dict[str, Any] | None = None
    query: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class Bare:
    """The endpoint returns a JSON array at the top level."""

    def unwrap(self, response: Any) -> list[Any]:
        if not isinstance(response, list):
            raise ValidationError(
                f"Expected a list in the response, got {type(response).__name__}"
            )
        return response


@dataclass(frozen=True)
class Wrapped:
    """The endpoint returns an object holding the array under ``field``."""

    field: str

    def unwrap(self, response: Any) -> list[Any]:
        if not isinstance(response, dict):
            raise ValidationError(
                f"Expected an object with '{self.field}' in the response, "
                f"got {type(response).__name__}"
            )
        items = response.get(self.field)
        if not isinstance(items, list):
            raise ValidationError(
                f"Expected '{self.field}' to be a list in the response, "
                f"got {type(items).__name__}"
            )
        return items


Envelope = Bare | Wrapped

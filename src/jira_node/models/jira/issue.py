"""
Issue payload models.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from .common import IdReference, KeyReference, UserReference


class IssueFields(ApiModel):
    """
    The ``fields`` object of an issue create or edit request.

    Every field is optional so the same model serves both operations; fields
    left as None are not sent.
    """

    summary: str | None = None
    project: IdReference | None = None
    issue_type: IdReference | None = Field(default=None, alias="issuetype")
    labels: list[str] | None = None
    priority: IdReference | None = None
    assignee: UserReference | None = None
    description: str | None = None
    parent: KeyReference | None = None


class IssuePayload(ApiModel):
    """Request body for ``POST /issue`` and ``PUT /issue/{key}``."""

    fields: IssueFields = Field(default_factory=IssueFields)


class IssueType(ApiModel):
    """An issue type as listed by ``GET /issuetype``."""

    id: str
    name: str = ""
    subtask: bool = False

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssueType":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            subtask=bool(data.get("subtask", False)),
        )

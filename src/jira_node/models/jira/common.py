"""
References to other Jira entities, as used inside request bodies.
"""

from pydantic import Field

from ..base import ApiModel


class IdReference(ApiModel):
    """Reference by numeric id, e.g. a project, issue type or priority."""

    id: str


class KeyReference(ApiModel):
    """Reference by key, e.g. a parent issue."""

    key: str


class UserReference(ApiModel):
    """
    Reference to a user.

    Jira Cloud identifies users by account id; Jira Server by user name.
    """

    account_id: str | None = Field(default=None, alias="accountId")
    name: str | None = None


class GroupReference(ApiModel):
    """Reference to a group by name."""

    name: str

"""
Models for the issue notify operation.
"""

from pydantic import Field

from ..base import ApiModel
from .common import GroupReference, UserReference


class NotificationRecipients(ApiModel):
    """The ``to`` object: who receives the notification."""

    reporter: bool | None = None
    assignee: bool | None = None
    watchers: bool | None = None
    voters: bool | None = None
    users: list[UserReference] | None = None
    groups: list[GroupReference] | None = None


class NotificationRestrictions(ApiModel):
    """The ``restrict`` object: recipients must belong to one of these groups."""

    groups: list[GroupReference] | None = None


class NotifyBody(ApiModel):
    """Text of a notification sent with ``POST /issue/{key}/notify``.

    The ``to`` and ``restrict`` objects are added to the serialized body
    as they are, so that objects supplied as raw JSON pass through untouched.
    """

    subject: str | None = None
    text_body: str | None = Field(default=None, alias="textBody")
    html_body: str | None = Field(default=None, alias="htmlBody")

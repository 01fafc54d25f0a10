"""
Pydantic models for the Jira node.
"""

from .base import ApiModel
from .jira import (
    ApiRequest,
    Bare,
    Envelope,
    GroupReference,
    IdReference,
    IssueFields,
    IssuePayload,
    IssueType,
    KeyReference,
    NotificationRecipients,
    NotificationRestrictions,
    NotifyBody,
    OptionEntry,
    UserReference,
    Wrapped,
)

__all__ = [
    "ApiModel",
    "ApiRequest",
    "Bare",
    "Envelope",
    "GroupReference",
    "IdReference",
    "IssueFields",
    "IssuePayload",
    "IssueType",
    "KeyReference",
    "NotificationRecipients",
    "NotificationRestrictions",
    "NotifyBody",
    "OptionEntry",
    "UserReference",
    "Wrapped",
]

"""
Jira models for request bodies, option entries and response envelopes.
"""

from .common import GroupReference, IdReference, KeyReference, UserReference
from .issue import IssueFields, IssuePayload, IssueType
from .notification import NotificationRecipients, NotificationRestrictions, NotifyBody
from .option import OptionEntry
from .request import ApiRequest, Bare, Envelope, HttpMethod, Wrapped

__all__ = [
    "ApiRequest",
    "Bare",
    "Envelope",
    "GroupReference",
    "HttpMethod",
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

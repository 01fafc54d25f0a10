"""Module for Jira issue notification operations."""

import logging
from typing import Any

from ..exceptions import ValidationError
from ..models.jira import (
    ApiRequest,
    GroupReference,
    NotificationRecipients,
    NotificationRestrictions,
    NotifyBody,
    UserReference,
)
from ..utils.validation import parse_flag, parse_json_object
from .client import JiraClient

logger = logging.getLogger("jira-node")


def _as_values(value: Any, parameter: str) -> dict[str, Any]:
    if not value:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(f"Parameter '{parameter}' must be an object")
    return value


def _as_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value]


class NotificationsMixin(JiraClient):
    """Mixin for sending e-mail notifications about an issue."""

    def _build_recipients(self, values: dict[str, Any]) -> NotificationRecipients:
        recipients = NotificationRecipients()
        for flag in ("reporter", "assignee", "watchers", "voters"):
            if parse_flag(values.get(flag, False), flag):
                setattr(recipients, flag, True)

        users = _as_list(values.get("users"))
        if users:
            recipients.users = [UserReference(account_id=user) for user in users]
        groups = _as_list(values.get("groups"))
        if groups:
            recipients.groups = [GroupReference(name=group) for group in groups]
        return recipients

    def _build_restrictions(self, values: dict[str, Any]) -> NotificationRestrictions:
        restrictions = NotificationRestrictions()
        groups = _as_list(values.get("groups"))
        if groups:
            restrictions.groups = [GroupReference(name=group) for group in groups]
        return restrictions

    def build_notify_request(self, index: int) -> ApiRequest:
        """
        Build the notification request for the input record at ``index``.

        Recipients and restrictions come either from the structured
        parameters or, when ``jsonParameters`` is set, from raw JSON text
        that is sent as parsed.

        Args:
            index: The input record index

        Returns:
            The ``POST /issue/{issueKey}/notify`` request

        Raises:
            ValidationError: If the JSON text is invalid or not an object
        """
        issue_key = self.parameters.get_parameter("issueKey", index)
        additional_fields = self._get_collection("additionalFields", index)
        json_parameters = self._get_flag("jsonParameters", index)

        body = NotifyBody(
            subject=additional_fields.get("subject") or None,
            text_body=additional_fields.get("textBody") or None,
            html_body=additional_fields.get("htmlBody") or None,
        ).to_api()

        if json_parameters:
            recipients = parse_json_object(
                self.parameters.get_parameter("notificationRecipientsJson", index, ""),
                "notificationRecipientsJson",
            )
            if recipients is not None:
                body["to"] = recipients
            restrictions = parse_json_object(
                self.parameters.get_parameter(
                    "notificationRecipientsRestrictionsJson", index, ""
                ),
                "notificationRecipientsRestrictionsJson",
            )
            if restrictions is not None:
                body["restrict"] = restrictions
        else:
            recipients_ui = self._get_collection("notificationRecipientsUi", index)
            body["to"] = self._build_recipients(
                _as_values(
                    recipients_ui.get("notificationRecipientsValues"),
                    "notificationRecipientsValues",
                )
            ).to_api()
            restrictions_ui = self._get_collection(
                "notificationRecipientsRestrictionsUi", index
            )
            body["restrict"] = self._build_restrictions(
                _as_values(
                    restrictions_ui.get("notificationRecipientsRestrictionsValues"),
                    "notificationRecipientsRestrictionsValues",
                )
            ).to_api()

        return ApiRequest(path=f"/issue/{issue_key}/notify", method="POST", body=body)

    def notify_issue(self, index: int) -> dict[str, Any]:
        """Send the notification described by the input record at ``index``."""
        request = self.build_notify_request(index)
        logger.info(f"Sending notification for {request.path}")
        return self.request(request.path, request.method, request.body)

"""Module for Jira issue operations."""

import logging
from typing import Any

from ..exceptions import ValidationError
from ..models.jira import (
    ApiRequest,
    IdReference,
    IssueFields,
    IssuePayload,
    IssueType,
    KeyReference,
    UserReference,
)
from ..utils.validation import parse_flag, split_comma_list
from .client import JiraClient
from .constants import ISSUE_TYPES_ENVELOPE

logger = logging.getLogger("jira-node")


class IssuesMixin(JiraClient):
    """Mixin for creating, editing, reading and deleting issues."""

    def get_issue_types(self) -> list[IssueType]:
        """
        Get all issue types visible to the user.

        Returns:
            List of IssueType models
        """
        response = self.request("/issuetype", "GET")
        return [
            IssueType.from_api_response(issue_type)
            for issue_type in ISSUE_TYPES_ENVELOPE.unwrap(response)
            if isinstance(issue_type, dict)
        ]

    def get_subtask_issue_type_ids(self) -> set[str]:
        """Get the ids of the issue types flagged as subtasks."""
        return {
            issue_type.id
            for issue_type in self.get_issue_types()
            if issue_type.subtask
        }

    def _user_reference(self, user: str) -> UserReference:
        if self.config.is_cloud:
            return UserReference(account_id=user)
        return UserReference(name=user)

    def _apply_parent(
        self, fields: IssueFields, issue_type_id: str, parent_key: str | None
    ) -> None:
        """
        Set the parent of a subtask.

        Args:
            fields: The fields being built
            issue_type_id: The id of the chosen issue type
            parent_key: The parent issue key, if supplied

        Raises:
            ValidationError: If the issue type is a subtask and no parent key was given
        """
        if issue_type_id not in self.get_subtask_issue_type_ids():
            return
        if not parent_key:
            raise ValidationError(
                "You must define a Parent Issue Key when Issue type is sub-task"
            )
        fields.parent = KeyReference(key=parent_key.upper())

    def _apply_optional_fields(
        self, fields: IssueFields, values: dict[str, Any]
    ) -> None:
        labels = values.get("labels")
        if labels:
            if isinstance(labels, str):
                labels = split_comma_list(labels)
            fields.labels = [str(label) for label in labels]
        if values.get("priority"):
            fields.priority = IdReference(id=str(values["priority"]))
        if values.get("assignee"):
            fields.assignee = self._user_reference(str(values["assignee"]))
        if values.get("description"):
            fields.description = str(values["description"])

    def build_create_request(self, index: int) -> ApiRequest:
        """
        Build the request creating an issue, or a subtask.

        Looks up the issue types first: subtask types need a parent issue key.

        Args:
            index: The input record index

        Returns:
            The ``POST /issue`` request

        Raises:
            ValidationError: If a required parameter is missing or a subtask
                has no parent issue key
        """
        summary = self.parameters.get_parameter("summary", index)
        project_id = self.parameters.get_parameter("project", index)
        issue_type_id = str(self.parameters.get_parameter("issueType", index))
        additional_fields = self._get_collection("additionalFields", index)

        fields = IssueFields(
            summary=str(summary),
            project=IdReference(id=str(project_id)),
            issue_type=IdReference(id=issue_type_id),
        )
        self._apply_optional_fields(fields, additional_fields)
        self._apply_parent(
            fields, issue_type_id, additional_fields.get("parentIssueKey")
        )

        query: dict[str, Any] = {}
        if parse_flag(additional_fields.get("updateHistory", False), "updateHistory"):
            query["updateHistory"] = True

        return ApiRequest(
            path="/issue",
            method="POST",
            body=IssuePayload(fields=fields).to_api(),
            query=query,
        )

    def create_issue(self, index: int) -> dict[str, Any]:
        """Create the issue described by the input record at ``index``."""
        request = self.build_create_request(index)
        return self.request(request.path, request.method, request.body, request.query)

    def build_update_request(self, index: int) -> ApiRequest:
        """
        Build the request editing an existing issue.

        Only the supplied update fields are sent. The subtask rule applies
        when the issue type is changed.

        Args:
            index: The input record index

        Returns:
            The ``PUT /issue/{issueKey}`` request
        """
        issue_key = self.parameters.get_parameter("issueKey", index)
        update_fields = self._get_collection("updateFields", index)

        fields = IssueFields()
        if update_fields.get("summary"):
            fields.summary = str(update_fields["summary"])
        if update_fields.get("issueType"):
            fields.issue_type = IdReference(id=str(update_fields["issueType"]))
        self._apply_optional_fields(fields, update_fields)
        if fields.issue_type is not None:
            self._apply_parent(
                fields, fields.issue_type.id, update_fields.get("parentIssueKey")
            )

        return ApiRequest(
            path=f"/issue/{issue_key}",
            method="PUT",
            body=IssuePayload(fields=fields).to_api(),
        )

    def update_issue(self, index: int) -> dict[str, Any]:
        """Edit the issue named by the input record at ``index``."""
        request = self.build_update_request(index)
        return self.request(request.path, request.method, request.body, request.query)

    def build_get_request(self, index: int) -> ApiRequest:
        """Build the request reading one issue, passing through the chosen options."""
        issue_key = self.parameters.get_parameter("issueKey", index)
        additional_fields = self._get_collection("additionalFields", index)

        query: dict[str, Any] = {}
        for name in ("fields", "fieldsByKey", "expand", "properties", "updateHistory"):
            if additional_fields.get(name):
                query[name] = additional_fields[name]

        return ApiRequest(path=f"/issue/{issue_key}", method="GET", query=query)

    def get_issue(self, index: int) -> dict[str, Any]:
        request = self.build_get_request(index)
        return self.request(request.path, request.method, query=request.query)

    def build_delete_request(self, index: int) -> ApiRequest:
        issue_key = self.parameters.get_parameter("issueKey", index)
        delete_subtasks = self._get_flag("deleteSubtasks", index)
        return ApiRequest(
            path=f"/issue/{issue_key}",
            method="DELETE",
            query={"deleteSubtasks": delete_subtasks},
        )

    def delete_issue(self, index: int) -> dict[str, Any]:
        """Delete the issue named by the input record at ``index``."""
        request = self.build_delete_request(index)
        logger.info(
            f"Deleting {request.path} (subtasks: {request.query['deleteSubtasks']})"
        )
        return self.request(request.path, request.method, query=request.query)

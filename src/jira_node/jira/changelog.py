"""Module for Jira issue changelog operations."""

from typing import Any

from ..models.jira import ApiRequest
from .client import JiraClient
from .constants import CHANGELOG_ENVELOPE, DEFAULT_PAGE_SIZE


class ChangelogMixin(JiraClient):
    """Mixin for reading the change history of an issue."""

    def build_changelog_request(self, index: int) -> ApiRequest:
        issue_key = self.parameters.get_parameter("issueKey", index)
        query: dict[str, Any] = {}
        if not self._get_flag("returnAll", index):
            query["maxResults"] = self._get_count("limit", index, DEFAULT_PAGE_SIZE)
        return ApiRequest(
            path=f"/issue/{issue_key}/changelog", method="GET", query=query
        )

    def get_issue_changelog(self, index: int) -> list[dict[str, Any]]:
        """
        Get the changelog entries of an issue.

        Args:
            index: The input record index

        Returns:
            All changelog entries when ``returnAll`` is set, otherwise at most ``limit``
        """
        request = self.build_changelog_request(index)
        if self._get_flag("returnAll", index):
            return self.request_all_items(
                CHANGELOG_ENVELOPE.field, request.path, request.method
            )

        response = self.request(request.path, request.method, query=request.query)
        return CHANGELOG_ENVELOPE.unwrap(response)

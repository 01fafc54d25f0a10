"""Module for Jira transition operations."""

from typing import Any

from ..models.jira import ApiRequest
from .client import JiraClient
from .constants import TRANSITIONS_ENVELOPE


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def build_transitions_request(self, index: int) -> ApiRequest:
        issue_key = self.parameters.get_parameter("issueKey", index)
        additional_fields = self._get_collection("additionalFields", index)

        query: dict[str, Any] = {}
        for name in ("transitionId", "expand", "skipRemoteOnlyCondition"):
            if additional_fields.get(name):
                query[name] = additional_fields[name]

        return ApiRequest(
            path=f"/issue/{issue_key}/transitions", method="GET", query=query
        )

    def get_transitions(self, index: int) -> list[dict[str, Any]]:
        """
        Get the transitions available for an issue in its current status.

        Args:
            index: The input record index

        Returns:
            List of transitions as returned by Jira
        """
        request = self.build_transitions_request(index)
        response = self.request(request.path, request.method, query=request.query)
        return TRANSITIONS_ENVELOPE.unwrap(response)

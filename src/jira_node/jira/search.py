"""Module for Jira search operations."""

import logging
from typing import Any

from ..models.jira import ApiRequest
from ..utils.validation import split_comma_list
from .client import JiraClient
from .constants import DEFAULT_PAGE_SIZE, SEARCH_ENVELOPE

logger = logging.getLogger("jira-node")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def build_search_request(self, index: int) -> ApiRequest:
        """
        Build the JQL search request for the input record at ``index``.

        The result cap is only added when not all results are requested;
        the pagination cursor is added per page.

        Args:
            index: The input record index

        Returns:
            The ``POST /search`` request
        """
        options = self._get_collection("options", index)
        return_all = self._get_flag("returnAll", index)

        body: dict[str, Any] = {}
        if options.get("fields"):
            body["fields"] = split_comma_list(str(options["fields"]))
        if options.get("jql"):
            body["jql"] = options["jql"]
        if options.get("expand"):
            body["expand"] = options["expand"]
        if not return_all:
            body["maxResults"] = self._get_count("limit", index, DEFAULT_PAGE_SIZE)

        return ApiRequest(path="/search", method="POST", body=body)

    def search_issues(self, index: int) -> list[dict[str, Any]]:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            index: The input record index

        Returns:
            The matching issues, all of them when ``returnAll`` is set,
            otherwise at most ``limit``
        """
        request = self.build_search_request(index)
        if self._get_flag("returnAll", index):
            logger.info(f"Fetching all issues for JQL: {request.body.get('jql', '')}")
            return self.request_all_items(
                SEARCH_ENVELOPE.field, request.path, request.method, request.body
            )

        response = self.request(request.path, request.method, request.body)
        return SEARCH_ENVELOPE.unwrap(response)

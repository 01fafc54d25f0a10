"""Module routing input records to Jira operations."""

import logging
from collections.abc import Callable
from typing import Any

from ..exceptions import ValidationError
from .client import JiraClient
from .protocols import IssueOperationsProto

logger = logging.getLogger("jira-node")

RESOURCES = ("issue",)


class DispatcherMixin(JiraClient, IssueOperationsProto):
    """Mixin running one operation over every input record."""

    def _operation_handlers(self) -> dict[str, Callable[[int], Any]]:
        return {
            "create": self.create_issue,
            "update": self.update_issue,
            "get": self.get_issue,
            "getAll": self.search_issues,
            "changelog": self.get_issue_changelog,
            "notify": self.notify_issue,
            "transitions": self.get_transitions,
            "delete": self.delete_issue,
        }

    def execute(self) -> list[dict[str, Any]]:
        """
        Run the configured operation for each input record, in order.

        The resource and operation are read once from the first record;
        every other parameter is read per record. A failure stops the batch.

        Returns:
            A flat list of output records: list results are spliced in,
            other results are appended

        Raises:
            ValidationError: If the resource or operation is unknown, or a
                record's parameters are invalid
            RemoteError: If a Jira call fails
        """
        items = self.parameters.get_input_data()
        resource = self.parameters.get_parameter("resource", 0, "issue")
        operation = self.parameters.get_parameter("operation", 0)

        if resource not in RESOURCES:
            msg = f"The resource '{resource}' is not supported"
            logger.error(msg)
            raise ValidationError(msg)
        handler = self._operation_handlers().get(operation)
        if handler is None:
            msg = f"The operation '{operation}' is not supported for resource '{resource}'"
            logger.error(msg)
            raise ValidationError(msg)

        logger.info(f"Running {resource}:{operation} for {len(items)} item(s)")
        results: list[dict[str, Any]] = []
        for index in range(len(items)):
            logger.debug(f"Processing item {index}")
            try:
                response = handler(index)
            except ValidationError as e:
                logger.error(f"Item {index} is invalid: {e.message}")
                raise
            if isinstance(response, list):
                results.extend(response)
            else:
                results.append(response)
        return results

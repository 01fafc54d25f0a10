"""Module for Jira protocol definitions."""

from abc import abstractmethod
from typing import Any, Protocol


class IssueOperationsProto(Protocol):
    """Protocol defining the per-record issue operations.

    Each operation reads its parameters for the input record at ``index``
    and returns the Jira response, unwrapped where Jira returns a list.
    """

    @abstractmethod
    def create_issue(self, index: int) -> dict[str, Any]:
        """Create an issue."""

    @abstractmethod
    def update_issue(self, index: int) -> dict[str, Any]:
        """Edit an issue."""

    @abstractmethod
    def get_issue(self, index: int) -> dict[str, Any]:
        """Read an issue."""

    @abstractmethod
    def search_issues(self, index: int) -> list[dict[str, Any]]:
        """Search issues with JQL."""

    @abstractmethod
    def get_issue_changelog(self, index: int) -> list[dict[str, Any]]:
        """Read the changelog of an issue."""

    @abstractmethod
    def notify_issue(self, index: int) -> dict[str, Any]:
        """Send a notification about an issue."""

    @abstractmethod
    def get_transitions(self, index: int) -> list[dict[str, Any]]:
        """Read the transitions available for an issue."""

    @abstractmethod
    def delete_issue(self, index: int) -> dict[str, Any]:
        """Delete an issue."""

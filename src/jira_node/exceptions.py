"""Exceptions raised by the Jira node."""

from typing import Any

ERROR_PREFIX = "Jira Error"


class JiraNodeError(Exception):
    """Base class for all Jira node errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{ERROR_PREFIX}: {message}")


class ValidationError(JiraNodeError):
    """Raised when parameters or a response do not have the expected shape."""


class RemoteError(JiraNodeError):
    """Raised when the Jira API call fails.

    Wraps the HTTP status and the response body when the failure came back
    from the server. Transport failures carry no status.
    """

    def __init__(
        self, message: str, status: int | None = None, body: Any = None
    ) -> None:
        self.status = status
        self.body = body
        if status is not None:
            message = f"{message} (HTTP {status})"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class JiraAuthenticationError(RemoteError):
    """Raised when Jira rejects the credentials (401/403)."""

"""Module for loading reference data shown as options in the host's UI."""

import logging
from collections.abc import Callable
from typing import Any

from ..exceptions import ValidationError
from ..models.jira import Envelope, OptionEntry
from .client import JiraClient
from .constants import (
    CLOUD_PROJECTS_ENVELOPE,
    GROUPS_ENVELOPE,
    ISSUE_TYPES_ENVELOPE,
    LABELS_ENVELOPE,
    PRIORITIES_ENVELOPE,
    SERVER_PROJECTS_ENVELOPE,
    USERS_ENVELOPE,
)

logger = logging.getLogger("jira-node")


class OptionsMixin(JiraClient):
    """Mixin for the option loaders.

    Each loader reads one reference endpoint without pagination and maps every
    entry to an OptionEntry. Failures are raised, never partially returned.
    """

    def _load_options(
        self,
        path: str,
        envelope: Envelope,
        to_option: Callable[[Any], tuple[Any, Any]],
    ) -> list[OptionEntry]:
        response = self.request(path, "GET")
        options = []
        for entry in envelope.unwrap(response):
            try:
                name, value = to_option(entry)
            except (KeyError, TypeError) as e:
                logger.error(f"Unexpected entry from {path}: {entry!r}")
                raise ValidationError(
                    f"Unexpected entry shape in the response of {path}: {e}"
                ) from e
            options.append(OptionEntry(name=str(name), value=str(value)))
        logger.debug(f"Loaded {len(options)} options from {path}")
        return options

    def get_projects(self) -> list[OptionEntry]:
        """Get all projects, as project name and id."""
        if self.config.is_cloud:
            path, envelope = "/project/search", CLOUD_PROJECTS_ENVELOPE
        else:
            path, envelope = "/project", SERVER_PROJECTS_ENVELOPE
        return self._load_options(path, envelope, lambda p: (p["name"], p["id"]))

    def get_issue_type_options(self) -> list[OptionEntry]:
        """Get all issue types, as issue type name and id."""
        return self._load_options(
            "/issuetype", ISSUE_TYPES_ENVELOPE, lambda t: (t["name"], t["id"])
        )

    def get_labels(self) -> list[OptionEntry]:
        """Get all labels; a label is its own name and value."""
        return self._load_options(
            "/label", LABELS_ENVELOPE, lambda label: (label, label)
        )

    def get_priorities(self) -> list[OptionEntry]:
        """Get all priorities, as priority name and id."""
        return self._load_options(
            "/priority", PRIORITIES_ENVELOPE, lambda p: (p["name"], p["id"])
        )

    def get_users(self) -> list[OptionEntry]:
        """Get users, as display name and account id."""
        return self._load_options(
            "/users/search",
            USERS_ENVELOPE,
            lambda u: (u["displayName"], u["accountId"]),
        )

    def get_groups(self) -> list[OptionEntry]:
        """Get groups; a group is identified by its name."""
        return self._load_options(
            "/groups/picker", GROUPS_ENVELOPE, lambda g: (g["name"], g["name"])
        )

    def load_options(self, method_name: str) -> list[OptionEntry]:
        """
        Run the option loader registered under the host's method name.

        Args:
            method_name: The loader name, e.g. 'getProjects'

        Returns:
            The loaded option entries

        Raises:
            ValidationError: If no loader has that name
        """
        loaders: dict[str, Callable[[], list[OptionEntry]]] = {
            "getProjects": self.get_projects,
            "getIssueTypes": self.get_issue_type_options,
            "getLabels": self.get_labels,
            "getPriorities": self.get_priorities,
            "getUsers": self.get_users,
            "getGroups": self.get_groups,
        }
        loader = loaders.get(method_name)
        if loader is None:
            msg = f"Unknown option loader: {method_name}"
            logger.error(msg)
            raise ValidationError(msg)
        try:
            return loader()
        except ValidationError as e:
            logger.error(f"Loading options with {method_name} failed: {e.message}")
            raise

"""Jira module for jira_node.

Request builders, the HTTP gateway and the option loaders for the Jira
Software REST API, combined into JiraNode.
"""

from .changelog import ChangelogMixin
from .client import JiraClient
from .config import JiraConfig
from .dispatcher import DispatcherMixin
from .issues import IssuesMixin
from .notifications import NotificationsMixin
from .options import OptionsMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraNode(
    IssuesMixin,
    SearchMixin,
    ChangelogMixin,
    NotificationsMixin,
    TransitionsMixin,
    OptionsMixin,
    DispatcherMixin,
):
    """
    The workflow step running Jira operations over a batch of input records.

    This class inherits from mixins that provide specific functionality:
    - IssuesMixin: Create, update, get and delete issues
    - SearchMixin: JQL search
    - ChangelogMixin: Issue change history
    - NotificationsMixin: Issue notifications
    - TransitionsMixin: Available issue transitions
    - OptionsMixin: Option loaders for the host's parameter UI
    - DispatcherMixin: Routing of input records to operations
    """

    pass


__all__ = ["JiraNode", "JiraConfig", "JiraClient"]

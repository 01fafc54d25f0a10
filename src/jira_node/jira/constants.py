"""Constants specific to Jira operations."""

from ..models.jira import Bare, Wrapped

API_ROOT = "rest/api"
API_VERSION = 2

CLOUD_CREDENTIALS = "jiraSoftwareCloudApi"
SERVER_CREDENTIALS = "jiraSoftwareServerApi"

# Credential set used for each value of the ``jiraVersion`` parameter.
CREDENTIALS_BY_VERSION: dict[str, str] = {
    "cloud": CLOUD_CREDENTIALS,
    "server": SERVER_CREDENTIALS,
}

DEFAULT_PAGE_SIZE = 50

# Response envelopes of the endpoints whose results are lists.
ISSUE_TYPES_ENVELOPE = Bare()
CLOUD_PROJECTS_ENVELOPE = Wrapped("values")
SERVER_PROJECTS_ENVELOPE = Bare()
LABELS_ENVELOPE = Wrapped("values")
PRIORITIES_ENVELOPE = Bare()
USERS_ENVELOPE = Bare()
GROUPS_ENVELOPE = Wrapped("groups")
SEARCH_ENVELOPE = Wrapped("issues")
CHANGELOG_ENVELOPE = Wrapped("values")
TRANSITIONS_ENVELOPE = Wrapped("transitions")

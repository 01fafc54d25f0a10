"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_node.host import StaticParameterProvider
from jira_node.jira import JiraNode
from jira_node.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_EMAIL": "test@example.com",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a Jira Cloud configuration."""
    return JiraConfig(
        url="https://test.atlassian.net",
        version="cloud",
        email="test@example.com",
        api_token="test_token",
    )


@pytest.fixture
def server_config():
    """Create a Jira Server configuration."""
    return JiraConfig(
        url="https://jira.example.com",
        version="server",
        email="admin",
        password="secret",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira REST client."""
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = (
        lambda resource, api_root=None, api_version=None: (
            f"{api_root}/{api_version}/{resource}"
        )
    )
    return mock_jira


@pytest.fixture
def make_node(mock_config, mock_atlassian_jira):
    """Factory creating a JiraNode over static parameters and a mocked client."""

    def _make_node(parameters=None, items=None, config=None):
        provider = StaticParameterProvider(
            parameters=parameters or {},
            items=items if items is not None else [{}],
        )
        with patch("jira_node.jira.client.Jira") as mock_jira_class:
            mock_jira_class.return_value = mock_atlassian_jira
            return JiraNode(provider, config=config or mock_config)

    return _make_node


@pytest.fixture
def issue_types():
    """Issue types as returned by GET /issuetype."""
    return [
        {"id": "10001", "name": "Task", "subtask": False},
        {"id": "10002", "name": "Bug", "subtask": False},
        {"id": "10003", "name": "Sub-task", "subtask": True},
    ]

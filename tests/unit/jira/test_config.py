"""Tests for the Jira config module."""

import os
from unittest.mock import patch

import pytest

from jira_node.jira.config import JiraConfig, default_version


def test_from_env_cloud():
    """Test that from_env loads a Jira Cloud configuration."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net/",
            "JIRA_EMAIL": "test@example.com",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        config = JiraConfig.from_env()
        assert config.url == "https://test.atlassian.net"
        assert config.version == "cloud"
        assert config.is_cloud is True
        assert config.email == "test@example.com"
        assert config.api_token == "test_token"
        assert config.password is None
        assert config.secret == "test_token"
        assert config.ssl_verify is True


def test_from_env_server_inferred_from_url():
    """Test that a non-Atlassian URL selects the server version."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_EMAIL": "admin",
            "JIRA_PASSWORD": "secret",
            "JIRA_SSL_VERIFY": "false",
        },
        clear=True,
    ):
        config = JiraConfig.from_env()
        assert config.version == "server"
        assert config.password == "secret"
        assert config.api_token is None
        assert config.secret == "secret"
        assert config.ssl_verify is False


def test_from_env_explicit_version():
    """Test that JIRA_VERSION overrides the URL heuristic."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.internal.example",
            "JIRA_VERSION": "Cloud",
            "JIRA_EMAIL": "test@example.com",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        assert JiraConfig.from_env().version == "cloud"


def test_from_env_missing_url():
    """Test that from_env raises ValueError when the URL is missing."""
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(
            ValueError, match="Missing required JIRA_URL environment variable"
        ):
            JiraConfig.from_env()


def test_from_env_cloud_requires_token():
    with patch.dict(
        os.environ,
        {"JIRA_URL": "https://test.atlassian.net", "JIRA_EMAIL": "test@example.com"},
        clear=True,
    ):
        with pytest.raises(ValueError, match="JIRA_API_TOKEN"):
            JiraConfig.from_env()


def test_from_env_invalid_version():
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_VERSION": "datacenter",
            "JIRA_EMAIL": "test@example.com",
        },
        clear=True,
    ):
        with pytest.raises(ValueError, match="JIRA_VERSION"):
            JiraConfig.from_env()


def test_from_credentials_cloud():
    """Test building the configuration from a host credential set."""
    config = JiraConfig.from_credentials(
        "cloud",
        {
            "domain": "https://test.atlassian.net/",
            "email": "test@example.com",
            "apiToken": "test_token",
        },
    )
    assert config.url == "https://test.atlassian.net"
    assert config.is_cloud
    assert config.api_token == "test_token"
    assert config.is_auth_configured()


def test_from_credentials_server():
    config = JiraConfig.from_credentials(
        "server",
        {"domain": "https://jira.example.com", "email": "admin", "password": "secret"},
    )
    assert not config.is_cloud
    assert config.password == "secret"
    assert config.api_token is None


def test_from_credentials_missing_entries():
    """Test that missing credential entries are all reported."""
    with pytest.raises(ValueError, match="domain, apiToken"):
        JiraConfig.from_credentials("cloud", {"email": "test@example.com"})


def test_from_credentials_none():
    with pytest.raises(ValueError, match="No credentials configured"):
        JiraConfig.from_credentials("server", None)


def test_from_credentials_unknown_version():
    with pytest.raises(ValueError, match="Unknown Jira version"):
        JiraConfig.from_credentials("datacenter", {"domain": "x"})


def test_to_credentials_round_trip(mock_config, server_config):
    """Test that to_credentials renders what from_credentials reads."""
    assert mock_config.to_credentials() == {
        "domain": "https://test.atlassian.net",
        "email": "test@example.com",
        "apiToken": "test_token",
    }
    assert (
        JiraConfig.from_credentials("server", server_config.to_credentials())
        == server_config
    )


def test_is_auth_configured_missing_secret():
    config = JiraConfig(url="https://test.atlassian.net", email="test@example.com")
    assert config.is_auth_configured() is False


@pytest.mark.parametrize(
    "url",
    [
        "https://example.atlassian.net",
        "https://example.jira.com/",
        "https://example.jira-dev.com",
    ],
)
def test_default_version_cloud(url):
    assert default_version(url) == "cloud"


@pytest.mark.parametrize(
    "url",
    [
        "https://jira.example.com",
        "https://atlassian.net.example.com",
        "http://localhost:8080",
        "http://192.168.1.100",
    ],
)
def test_default_version_server(url):
    assert default_version(url) == "server"


def test_from_credentials_ssl_verify_must_be_boolean():
    with pytest.raises(ValueError, match="sslVerify must be a boolean"):
        JiraConfig.from_credentials(
            "server",
            {
                "domain": "https://jira.example.com",
                "email": "admin",
                "password": "secret",
                "sslVerify": "false",
            },
        )

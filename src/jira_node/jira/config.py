"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlparse

from ..utils.logging import log_config_param

logger = logging.getLogger("jira-node")

JiraVersion = Literal["cloud", "server"]

CLOUD_HOST_SUFFIXES = (".atlassian.net", ".jira.com", ".jira-dev.com")


def default_version(url: str) -> JiraVersion:
    """Guess the deployment from the site URL: Atlassian-hosted sites are cloud."""
    hostname = urlparse(url).hostname or ""
    return "cloud" if hostname.endswith(CLOUD_HOST_SUFFIXES) else "server"


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Both deployments use basic auth:
    - Cloud: account email and API token
    - Server (self-hosted): user name or email and password
    """

    url: str  # Base URL for Jira, without /rest/api
    version: JiraVersion = "cloud"
    email: str | None = None  # Email (Cloud) or user name (Server)
    api_token: str | None = None  # API token (Cloud)
    password: str | None = None  # Password (Server)
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def is_cloud(self) -> bool:
        """Check if this configuration targets Jira Cloud."""
        return self.version == "cloud"

    @property
    def secret(self) -> str | None:
        """The secret that goes with ``email`` for the configured version."""
        return self.api_token if self.is_cloud else self.password

    @classmethod
    def from_credentials(
        cls, version: str, credentials: dict[str, Any] | None
    ) -> "JiraConfig":
        """Create configuration from a host credential set.

        Args:
            version: Either "cloud" or "server"
            credentials: The credential set (domain, email, apiToken or password)

        Returns:
            JiraConfig for the credential set

        Raises:
            ValueError: If the version is unknown or a credential entry is missing
        """
        if version not in ("cloud", "server"):
            raise ValueError(f"Unknown Jira version: {version}")
        if not credentials:
            raise ValueError(f"No credentials configured for Jira {version}")

        url = credentials.get("domain")
        email = credentials.get("email")
        secret_key = "apiToken" if version == "cloud" else "password"
        secret = credentials.get(secret_key)

        missing = [
            name
            for name, value in (("domain", url), ("email", email), (secret_key, secret))
            if not value
        ]
        if missing:
            raise ValueError(
                f"Jira {version} credentials are missing: {', '.join(missing)}"
            )

        ssl_verify = credentials.get("sslVerify", True)
        if not isinstance(ssl_verify, bool):
            raise ValueError(f"sslVerify must be a boolean, got {ssl_verify!r}")

        config = cls(
            url=str(url).rstrip("/"),
            version=version,  # type: ignore[arg-type]
            email=email,
            api_token=secret if version == "cloud" else None,
            password=secret if version == "server" else None,
            ssl_verify=ssl_verify,
        )
        config.log_params()
        return config

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            raise ValueError("Missing required JIRA_URL environment variable")

        version = os.getenv("JIRA_VERSION", "").lower()
        if not version:
            version = default_version(url)
        if version not in ("cloud", "server"):
            raise ValueError(f"JIRA_VERSION must be 'cloud' or 'server', got {version}")

        email = os.getenv("JIRA_EMAIL")
        api_token = os.getenv("JIRA_API_TOKEN")
        password = os.getenv("JIRA_PASSWORD")

        if not email:
            raise ValueError("Missing required JIRA_EMAIL environment variable")
        if version == "cloud" and not api_token:
            raise ValueError("Jira Cloud authentication requires JIRA_API_TOKEN")
        if version == "server" and not password:
            raise ValueError("Jira Server authentication requires JIRA_PASSWORD")

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=url.rstrip("/"),
            version=version,  # type: ignore[arg-type]
            email=email,
            api_token=api_token if version == "cloud" else None,
            password=password if version == "server" else None,
            ssl_verify=ssl_verify,
        )
        config.log_params()
        return config

    def to_credentials(self) -> dict[str, Any]:
        """Render this configuration as a host credential set."""
        credentials: dict[str, Any] = {"domain": self.url, "email": self.email}
        if self.is_cloud:
            credentials["apiToken"] = self.api_token
        else:
            credentials["password"] = self.password
        if not self.ssl_verify:
            credentials["sslVerify"] = False
        return credentials

    def is_auth_configured(self) -> bool:
        """Check if the credentials for the configured version are complete."""
        return bool(self.url and self.email and self.secret)

    def log_params(self) -> None:
        log_config_param(logger, "URL", self.url)
        log_config_param(logger, "version", self.version)
        log_config_param(logger, "email", self.email)
        log_config_param(logger, "secret", self.secret, sensitive=True)

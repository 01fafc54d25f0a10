"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira
from requests import Response
from requests.exceptions import HTTPError, RequestException

from ..exceptions import JiraAuthenticationError, RemoteError, ValidationError
from ..host import ParameterProvider
from ..models.jira import HttpMethod, Wrapped
from ..utils.validation import parse_count, parse_flag
from .config import JiraConfig
from .constants import API_ROOT, API_VERSION, CREDENTIALS_BY_VERSION, DEFAULT_PAGE_SIZE

logger = logging.getLogger("jira-node")


class JiraClient:
    """Base client for Jira API interactions.

    Holds the host's parameter provider and an authenticated
    ``atlassian.Jira`` REST client built from the host's credentials.
    """

    config: JiraConfig
    parameters: ParameterProvider

    def __init__(
        self, parameters: ParameterProvider, config: JiraConfig | None = None
    ) -> None:
        """Initialize the Jira client.

        Args:
            parameters: The host's parameter and credential provider
            config: Optional configuration (resolved from the host's
                credentials if not provided)

        Raises:
            ValidationError: If the Jira version or the credentials are invalid
        """
        self.parameters = parameters
        self.config = config or self._resolve_config()
        if not self.config.is_auth_configured():
            msg = f"Jira {self.config.version} credentials are incomplete"
            logger.error(msg)
            raise ValidationError(msg)

        self.jira = Jira(
            url=self.config.url,
            username=self.config.email,
            password=self.config.secret,
            cloud=self.config.is_cloud,
            verify_ssl=self.config.ssl_verify,
        )

    def _resolve_config(self) -> JiraConfig:
        """Build the configuration from the credential set of the chosen version."""
        version = self.parameters.get_parameter("jiraVersion", 0, "cloud")
        credential_name = CREDENTIALS_BY_VERSION.get(version)
        if credential_name is None:
            raise ValidationError(f"Unknown Jira version: {version}")

        credentials = self.parameters.get_credential(credential_name)
        try:
            return JiraConfig.from_credentials(version, credentials)
        except ValueError as e:
            logger.error(f"Invalid '{credential_name}' credentials: {e}")
            raise ValidationError(str(e)) from e

    def request(
        self,
        path: str,
        method: HttpMethod = "GET",
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
    ) -> Any:
        """
        Issue a single call against the Jira REST API.

        Args:
            path: The endpoint path relative to /rest/api/2 (e.g. '/issue')
            method: The HTTP method
            body: Optional JSON body (ignored for GET)
            query: Optional query parameters

        Returns:
            The parsed JSON response, or an empty dict if the body is empty

        Raises:
            JiraAuthenticationError: If Jira rejects the credentials (401/403)
            RemoteError: If the call fails for any other reason
            ValidationError: If Jira answers with something other than JSON
        """
        url = self.jira.resource_url(
            path.lstrip("/"), api_root=API_ROOT, api_version=API_VERSION
        )
        params = self._encode_query(query)
        logger.debug(f"{method} {url} params={params}")

        try:
            if method == "GET":
                response = self.jira.get(url, params=params)
            elif method == "POST":
                response = self.jira.post(url, data=body, params=params)
            elif method == "PUT":
                response = self.jira.put(url, data=body, params=params)
            elif method == "DELETE":
                response = self.jira.delete(url, params=params)
            else:
                raise ValidationError(f"Unsupported HTTP method: {method}")
        except HTTPError as http_err:
            raise self._classify_http_error(method, path, http_err) from http_err
        except RequestException as e:
            logger.error(f"Transport error during {method} {path}: {e}")
            raise RemoteError(f"{method} {path} failed", body=str(e)) from e

        if response is None or response == "":
            return {}
        if not isinstance(response, (dict, list)):
            msg = f"{method} {path} returned a non-JSON body"
            logger.error(f"{msg}: {str(response)[:200]}")
            raise ValidationError(msg)
        return response

    def request_all_items(
        self,
        property_name: str,
        path: str,
        method: HttpMethod = "GET",
        body: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Any]:
        """
        Repeatedly fetch pages and collect the items under ``property_name``.

        The cursor goes into the query string for GET and into the JSON body
        otherwise. Iteration stops at the first page that holds fewer than
        ``page_size`` items; the ``total`` reported by Jira is not used.

        Args:
            property_name: The response field holding the page's items
            path: The endpoint path relative to /rest/api/2
            method: The HTTP method
            body: Optional JSON body sent with every page
            query: Optional query parameters sent with every page
            page_size: Number of items requested per page

        Returns:
            All items from all pages, in order

        Raises:
            ValidationError: If a page does not contain a list under ``property_name``
            RemoteError: If any page request fails
        """
        envelope = Wrapped(property_name)
        items: list[Any] = []
        start_at = 0

        while True:
            cursor = {"startAt": start_at, "maxResults": page_size}
            if method == "GET":
                page = self.request(path, method, None, {**(query or {}), **cursor})
            else:
                page = self.request(path, method, {**(body or {}), **cursor}, query)

            page_items = envelope.unwrap(page)
            items.extend(page_items)
            logger.debug(
                f"Fetched {len(page_items)} '{property_name}' from {path} at {start_at}"
            )

            if len(page_items) < page_size:
                break
            start_at += page_size

        return items

    @staticmethod
    def _encode_query(query: dict[str, Any] | None) -> dict[str, Any]:
        """Drop None values and encode booleans the way Jira expects."""
        params: dict[str, Any] = {}
        for key, value in (query or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[key] = value
        return params

    @staticmethod
    def _classify_http_error(
        method: str, path: str, http_err: HTTPError
    ) -> RemoteError:
        response: Response | None = http_err.response
        status = response.status_code if response is not None else None
        body = response.text if response is not None and response.text else str(http_err)

        if status in (401, 403):
            logger.error(
                f"Authentication failed for Jira API ({status}). "
                "Please verify the credentials."
            )
            return JiraAuthenticationError(
                f"Authentication failed for {method} {path}", status, body
            )

        logger.error(f"HTTP error during {method} {path}: {status} {body}")
        return RemoteError(f"{method} {path} failed", status, body)

    def _get_collection(self, name: str, index: int) -> dict[str, Any]:
        """Read a collection parameter (e.g. ``additionalFields``) as a dict."""
        value = self.parameters.get_parameter(name, index, {})
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValidationError(
                f"Parameter '{name}' must be an object, got {type(value).__name__}"
            )
        return value

    def _get_flag(self, name: str, index: int, default: bool = False) -> bool:
        """Read a boolean parameter, rejecting anything that is not a bool."""
        return parse_flag(self.parameters.get_parameter(name, index, default), name)

    def _get_count(self, name: str, index: int, default: int) -> int:
        """Read a positive integer parameter such as ``limit``."""
        return parse_count(self.parameters.get_parameter(name, index, default), name)

"""Interface between the Jira node and the workflow host."""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .exceptions import ValidationError

_MISSING: Any = object()


@runtime_checkable
class ParameterProvider(Protocol):
    """Read-only view of the host's parameters, credentials and input records."""

    def get_parameter(self, name: str, index: int, default: Any = _MISSING) -> Any:
        """Resolve a node parameter for the input record at ``index``."""

    def get_credential(self, name: str) -> dict[str, Any] | None:
        """Return the named credential set, or None if it is not configured."""

    def get_input_data(self) -> list[dict[str, Any]]:
        """Return the batch of input records."""


@dataclass(frozen=True)
class StaticParameterProvider:
    """
    Parameter provider backed by plain dictionaries.

    Values in an input record override the shared parameters for that record,
    which lets a single batch carry per-record issue keys, summaries and so on.
    """

    parameters: dict[str, Any] = field(default_factory=dict)
    items: list[dict[str, Any]] = field(default_factory=lambda: [{}])
    credentials: dict[str, dict[str, Any]] = field(default_factory=dict)

    def get_parameter(self, name: str, index: int, default: Any = _MISSING) -> Any:
        if 0 <= index < len(self.items) and name in self.items[index]:
            return self.items[index][name]
        if name in self.parameters:
            return self.parameters[name]
        if default is not _MISSING:
            return default
        raise ValidationError(f"Missing required parameter '{name}' for item {index}")

    def get_credential(self, name: str) -> dict[str, Any] | None:
        return self.credentials.get(name)

    def get_input_data(self) -> list[dict[str, Any]]:
        return self.items

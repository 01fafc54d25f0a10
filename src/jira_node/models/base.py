"""
Base model for the request and response shapes exchanged with Jira.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    Fields use Python names and carry the Jira JSON name as an alias.
    Serialization drops unset values so request bodies stay sparse.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_api(self) -> dict[str, Any]:
        """Serialize to the Jira JSON shape, omitting fields that are None."""
        return self.model_dump(by_alias=True, exclude_none=True)

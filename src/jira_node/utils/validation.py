"""Validation helpers for host-supplied parameter values."""

import json
from typing import Annotated, Any

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

_FLAG = TypeAdapter(bool)
_COUNT = TypeAdapter(Annotated[int, Field(ge=1)])


def parse_json_object(value: Any, parameter: str) -> dict[str, Any] | None:
    """
    Parse a JSON text parameter into a dictionary.

    Blank text yields None. A value the host already parsed is accepted as is.

    Args:
        value: The raw parameter value
        parameter: The parameter name, used in error messages

    Returns:
        The parsed object, or None if the value is blank

    Raises:
        ValidationError: If the text is not valid JSON or not a JSON object
    """
    if value is None:
        return None
    if isinstance(value, dict):
        return value
    if not isinstance(value, str):
        raise ValidationError(
            f"Parameter '{parameter}' must be JSON text, got {type(value).__name__}"
        )
    if not value.strip():
        return None

    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Parameter '{parameter}' is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ValidationError(f"Parameter '{parameter}' must be a JSON object")
    return parsed


def split_comma_list(value: str | None) -> list[str]:
    """Split comma-separated text into a list of non-empty, stripped items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_flag(value: Any, parameter: str) -> bool:
    """
    Validate a boolean parameter.

    Only real booleans are accepted; text such as ``"false"`` is rejected
    rather than read as truthy.

    Raises:
        ValidationError: If the value is not a boolean
    """
    try:
        return _FLAG.validate_python(value, strict=True)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Parameter '{parameter}' must be a boolean, got {type(value).__name__}"
        ) from e


def parse_count(value: Any, parameter: str) -> int:
    """
    Validate a positive integer parameter, such as a result limit.

    Raises:
        ValidationError: If the value is not an integer of at least 1
    """
    try:
        return _COUNT.validate_python(value, strict=True)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Parameter '{parameter}' must be a positive integer, got {value!r}"
        ) from e

"""
Option entries shown in the host's parameter UI.
"""

from ..base import ApiModel


class OptionEntry(ApiModel):
    """A (display name, value) pair produced by an option loader."""

    name: str
    value: str

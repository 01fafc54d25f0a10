"""
Utility functions for the Jira node.
"""

from .logging import log_config_param, mask_sensitive, setup_logging
from .validation import parse_count, parse_flag, parse_json_object, split_comma_list

__all__ = [
    "log_config_param",
    "mask_sensitive",
    "parse_count",
    "parse_flag",
    "parse_json_object",
    "setup_logging",
    "split_comma_list",
]

"""
Root pytest configuration file for Jira node tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the root logger after tests that reconfigure logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

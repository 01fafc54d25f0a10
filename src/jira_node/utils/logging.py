"""Logging utilities for the Jira node."""

import logging

LOGGER_NAME = "jira-node"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the root logger and the jira-node logger.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured jira-node logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    root_logger.addHandler(handler)

    # atlassian-python-api logs every request at DEBUG
    logging.getLogger("atlassian").setLevel(max(level, logging.INFO))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    hidden = "*" * (len(value) - keep_chars * 2)
    return f"{value[:keep_chars]}{hidden}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a configuration parameter, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Jira {param}: {display_value}")

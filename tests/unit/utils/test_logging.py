import logging

from jira_node.utils.logging import log_config_param, mask_sensitive, setup_logging


def test_setup_logging_default_level():
    """Test setup_logging with default WARNING level"""
    logger = setup_logging()

    assert logger.level == logging.WARNING

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING

    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert handler.formatter._fmt == "%(levelname)s - %(name)s - %(message)s"


def test_setup_logging_custom_level():
    """Test setup_logging with custom DEBUG level"""
    logger = setup_logging(logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    # The REST client's request logging stays quiet
    assert logging.getLogger("atlassian").level == logging.INFO


def test_setup_logging_removes_existing_handlers():
    """Test that setup_logging removes existing handlers"""
    root_logger = logging.getLogger()
    test_handler = logging.StreamHandler()
    root_logger.addHandler(test_handler)

    setup_logging()

    assert len(root_logger.handlers) == 1
    assert test_handler not in root_logger.handlers


def test_setup_logging_logger_name():
    assert setup_logging().name == "jira-node"


def test_mask_sensitive():
    assert mask_sensitive(None) == "Not Provided"
    assert mask_sensitive("short") == "*****"
    assert mask_sensitive("abcd1234efgh") == "abcd****efgh"


def test_log_config_param_masks(caplog):
    logger = logging.getLogger("jira-node.test")
    with caplog.at_level(logging.INFO, logger="jira-node.test"):
        log_config_param(logger, "secret", "abcd1234efgh", sensitive=True)
        log_config_param(logger, "URL", None)

    assert "Jira secret: abcd****efgh" in caplog.text
    assert "Jira URL: Not Provided" in caplog.text

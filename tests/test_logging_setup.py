import logging

from fadeforge import config
from fadeforge.logging_setup import get_logger, setup_logging


def test_setup_is_idempotent():
    logger = setup_logging("DEBUG")
    handlers = list(logger.handlers)
    assert setup_logging() is logger
    assert logger.handlers == handlers


def test_child_logger_namespace():
    parent = logging.getLogger(config.APP_NAME)
    child = get_logger("session")
    assert child.name == f"{config.APP_NAME}.session"
    assert child.parent is parent

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_wantcheck_logger():
    """The cli group configures the wantcheck logger; undo it after each test."""
    logger = logging.getLogger("wantcheck")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)

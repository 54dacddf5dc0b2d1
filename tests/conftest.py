"""
Pytest configuration and fixtures for localizer tests
"""
import logging

import pytest

from localizer.logging_config import LOGGER_NAME, logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Start every test without leftover log indentation or CLI handlers"""
    logger.reset()
    yield
    logger.reset()
    base_logger = logging.getLogger(LOGGER_NAME)
    for handler in base_logger.handlers:
        handler.close()
    base_logger.handlers = []

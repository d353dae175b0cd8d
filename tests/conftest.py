"""
Fixtures shared by every test module; pytest picks them up by name,
no import needed.
"""
import logging
from typing import Any, Dict, Iterator

import pytest
import structlog

from array_subset.logger import PACKAGE_LOGGER_NAME


@pytest.fixture
def structlog_config() -> Iterator[Dict[str, Any]]:
    """Hands out the current structlog config and puts it back afterwards."""
    saved = dict(structlog.get_config())
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)
    yield saved
    structlog.configure(**saved)
    package_logger.setLevel(saved_level)
    package_logger.handlers[:] = saved_handlers


@pytest.fixture
def debug_logs() -> Iterator[list]:
    """Every structlog event, whatever the log levels say."""
    with structlog.testing.capture_logs() as logs:
        yield logs

import logging
import os
import sys

import structlog

from array_subset.utils.primitive_convertors import to_bool

Structlogger = structlog.stdlib.BoundLogger

LOG_LEVEL_ENV = "ARRAY_SUBSET_LOG_LEVEL"
LOG_JSON_ENV = "ARRAY_SUBSET_LOG_JSON"
PACKAGE_LOGGER_NAME = "array_subset"


def get_module_logger(name: str) -> Structlogger:
    """
    Modules should put
    LOGGER = get_module_logger(__name__)
    at module scope.

    Leaves structlog's global configuration alone: events run through
    whatever processors the host has configured and land on the stdlib
    logger `name`, so the host's logging levels decide what is shown.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def get_structlogger() -> Structlogger:
    """
    Opt-in: configure structlog (and the array_subset stdlib logger) from
    ARRAY_SUBSET_LOG_LEVEL and ARRAY_SUBSET_LOG_JSON.
    Nothing in this package calls it.
    """
    log_level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()  # e.g. "DEBUG"
    log_level = getattr(logging, log_level_name, None)  # e.g. logging.DEBUG, an int
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid {LOG_LEVEL_ENV}: {repr(log_level_name)}")

    if to_bool(os.getenv(LOG_JSON_ENV), default=True):
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            # include {"level": "info"} in the dict
            structlog.processors.add_log_level,
            # include timestamp in the dict
            structlog.processors.TimeStamper(fmt="iso"),
            # specify `logger.error(stack_info = True)` to get the stacktrace
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        # Filters out logs with a too-low log level like the built-in py logger
        wrapper_class=structlog.make_filtering_bound_logger(
            min_level=log_level,
        ),
        context_class=dict,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(log_level)
    if not package_logger.handlers:
        package_logger.addHandler(logging.StreamHandler(stream=sys.stdout))
    return structlog.stdlib.get_logger()

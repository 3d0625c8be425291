"""
Logging Package
Structured logging with sensitive data filtering

Module loggers are plain ``logging`` loggers under the ``linkable``
namespace, so applications configure them with LoggerConfig or with
their own handlers.
"""
from linkable.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

# Library default: silent unless the application configures handlers
logging.getLogger('linkable').addHandler(logging.NullHandler())


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Names outside the ``linkable`` namespace are nested under it, so one
    LoggerConfig.setup_logger('linkable') call configures every logger
    this package creates.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance

    Example:
        from linkable.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Built url route %s", route)
    """
    if not name or name == 'linkable':
        return logging.getLogger('linkable')

    if not name.startswith('linkable.'):
        name = f'linkable.{name}'

    return logging.getLogger(name)

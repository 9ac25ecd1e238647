"""
Logging configuration for the Slack OAuth client
"""
import logging
import sys

from .config import settings

PACKAGE_LOGGER = "slack_oauth"


def setup_logging() -> None:
    """
    Optionally route this package's log records to stdout

    Nothing calls this on import. Applications with their own logging
    setup should skip it; it only touches the ``slack_oauth`` logger and
    the httpx transport loggers, never the root logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))

    if not any(getattr(h, "_slack_oauth", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        handler._slack_oauth = True
        package_logger.addHandler(handler)

    # Transport chatter stays at WARNING
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance with the specified name"""
    return logging.getLogger(name)

"""Logging setup for the Customer Notes back end."""

import logging

from backend.app.core.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(settings=None) -> None:
    """Install a stream handler on the package logger once per process."""
    global _configured
    settings = settings or get_settings()
    logger = logging.getLogger("backend")
    logger.setLevel(settings.log_level)
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _configured = True

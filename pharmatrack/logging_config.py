"""Logging setup for the API process.

Errors go to ``error.log``, everything at the configured level goes to
``combined.log``, and outside production the same lines are echoed to the
console.
"""

import logging
import sys

from pharmatrack.config import Settings

LOG_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s message=%(message)s"

ERROR_LOG_FILE = "error.log"
COMBINED_LOG_FILE = "combined.log"


def configure_logging(settings: Settings) -> logging.Logger:
    """Install file and console handlers on the ``pharmatrack`` logger.

    Calling this more than once replaces the previously installed handlers.

    Args:
        settings: Settings providing ``log_level``, ``log_dir`` and ``environment``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("pharmatrack")
    logger.setLevel(settings.log_level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    error_handler = logging.FileHandler(settings.log_dir / ERROR_LOG_FILE)
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    logger.addHandler(error_handler)

    combined_handler = logging.FileHandler(settings.log_dir / COMBINED_LOG_FILE)
    combined_handler.setFormatter(formatter)
    logger.addHandler(combined_handler)

    if not settings.is_production:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.propagate = False
    return logger

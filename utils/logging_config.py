"""
Logging setup for the GetInsights app
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_NOISY_LOGGERS = ("matplotlib", "PIL", "urllib3", "watchdog", "fsevents")


def setup_logging(log_level: str = "INFO", log_format: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a single console handler

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string

    Returns:
        The application logger
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format or DEFAULT_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    # Streamlit reruns the script on every interaction; avoid stacking handlers
    root.handlers.clear()
    root.addHandler(handler)

    configure_third_party_logging()

    app_logger = logging.getLogger("getinsights")
    app_logger.debug("Logging initialized. Level: %s", logging.getLevelName(level))
    return app_logger


def configure_third_party_logging():
    """Reduce noise from third-party libraries"""
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

"""Package logger for skycycle.

Per-tick diagnostics are logged at DEBUG, catalog and state changes at INFO.
The starting level can be set with the ``SKYCYCLE_LOG_LEVEL`` environment
variable.
"""

import logging
import os

logger = logging.getLogger("skycycle")
logger.setLevel(os.environ.get("SKYCYCLE_LOG_LEVEL", "INFO").upper())

handler = logging.StreamHandler()
formatter = logging.Formatter(
    "[skycycle] %(levelname)s %(asctime)s "
    "[%(filename)s:%(funcName)s:%(lineno)d] %(message)s"
)
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.propagate = False


def set_log_level(level):
    """Change the package log level, e.g. ``set_log_level("DEBUG")``."""
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

"""Package logger"""

import logging

from .config import Config


logger = logging.getLogger("envlist")
logger.addHandler(logging.NullHandler())

try:
    logger.setLevel(Config.get_log_level())
except ValueError:
    # Unknown level name in ENVLIST_LOG_LEVEL
    logger.setLevel(Config.LOG_LEVEL)
    logger.warning(f"Invalid ENVLIST_LOG_LEVEL, falling back to {Config.LOG_LEVEL}")

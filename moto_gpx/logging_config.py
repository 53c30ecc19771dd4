"""
Logging setup for applications embedding the engine.

Library modules only create module-level loggers; the host process
calls setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional

from moto_gpx.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging to stdout.

    Args:
        level: Logging level name (DEBUG, INFO, ...). Defaults to
            settings.log_level.

    Returns:
        The package logger
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
    return logging.getLogger("moto_gpx")

"""
loguru sink setup. Library code only logs through loguru.logger; applications call
setup_logger() once at startup to pick the level and an optional rotating log file.
"""
import sys
from typing import Optional

from loguru import logger

from config_reader import config

_log_format = "{time:YYYY-MM-DD HH:mm:ss} - [{level}] - {name} - {function}({line}) - {message}"


def setup_logger(level: str = config.log_level, log_file: Optional[str] = config.log_file,
                 rotation: str = config.log_rotation):
    """Replace loguru's default sink with a stderr sink (and optional rotating file) at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=_log_format)
    if log_file:
        logger.add(log_file, level=level, format=_log_format, rotation=rotation)
    return logger

# py
from loguru import logger
import sys

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str, json_logs: bool = False, sink=None):
    """Replace loguru's default handler with a single sink (stderr unless given)."""
    level = level.upper()
    logger.remove()
    logger.add(sink or sys.stderr, level=level, format=LOG_FORMAT, serialize=json_logs, backtrace=False)
    logger.info("Logging configured", level=level, json_logs=json_logs)

import logging
import sys

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

logger = logging.getLogger('course_planner')
diagnostics_logger = logging.getLogger('course_planner.diagnostics')


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Send package logs to stderr, keeping stdout for normal output."""
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger

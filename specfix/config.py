"""
Configuration and logging setup for specfix.
"""

import os
import logging
import logging.handlers
from pathlib import Path

CONSOLE_FORMAT = 'specfix: %(levelname)s: %(message)s'
DEBUG_CONSOLE_FORMAT = 'specfix: %(levelname)s [%(name)s] %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _console_handler(level: int) -> logging.Handler:
    """Short stderr output for command line runs; logger names only when debugging."""
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT if level <= logging.DEBUG else CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(log_level: str = None, log_file: str = None):
    """Configure the ``specfix`` logger for a command line run.

    Rewrites are reported at DEBUG, per-file summaries at INFO; the default
    level keeps a packaging run quiet unless something goes wrong.

    Args:
        log_level: Logging level name, falls back to LOG_LEVEL then WARNING
        log_file: Optional file that receives timestamped records as well
    """
    level_name = (log_level or os.environ.get('LOG_LEVEL') or 'WARNING').upper()
    level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger('specfix')
    logger.setLevel(level)
    # Messages stop here so a host application's root handlers don't print them twice
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(level))
    if log_file:
        logger.addHandler(_file_handler(log_file, level))

    logger.debug(f"Logging configured with level: {level_name}")
    return logger


def get_config():
    """Get process configuration from environment variables."""
    return {
        'LOG_LEVEL': os.environ.get('LOG_LEVEL', 'WARNING'),
        'LOG_FILE': os.environ.get('LOG_FILE') or None,
    }

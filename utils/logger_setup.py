"""
Logging Setup
Routes loguru output to stderr and an optional rotating log file
"""

import os
import sys
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"

# Console never filters out errors, whatever LOG_LEVEL says
MAX_CONSOLE_LEVEL = "ERROR"


def configure_logging(level: str = None, log_file: str = None):
    """
    Replace loguru's default handler

    Stdout is left untouched so the deployed address is the only line on it.
    An unknown level still leaves an ERROR-level stderr sink in place before
    raising ValueError.

    Args:
        level: Console level (None = LOG_LEVEL env or INFO), capped at ERROR
        log_file: File sink path (None = DEPLOY_LOG_FILE env, unset = no file)
    """
    level = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    log_file = log_file or os.getenv('DEPLOY_LOG_FILE')

    logger.remove()

    max_level_no = logger.level(MAX_CONSOLE_LEVEL).no

    try:
        level_no = logger.level(level).no
    except ValueError:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=max_level_no, diagnose=False)
        raise ValueError(f"Unknown LOG_LEVEL '{level}'") from None

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=min(level_no, max_level_no),
        diagnose=False
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG",
            diagnose=False
        )

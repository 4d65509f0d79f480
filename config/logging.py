"""Loguru setup shared by the app and the engine."""
import sys

from loguru import logger

from config.default_params import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL):
    """Replace loguru's default sink with a single stderr sink at `level`."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        backtrace=True,
        diagnose=False,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    )
    return logger

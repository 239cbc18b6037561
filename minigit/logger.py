import sys

from loguru import logger

from .config import LogConfig


def setup_logging(log_config: LogConfig) -> None:
    logger.remove()
    if log_config.enable_console_logging:
        logger.add(
            sys.stderr,
            format=log_config.format,
            level=log_config.level,
            colorize=True,
        )

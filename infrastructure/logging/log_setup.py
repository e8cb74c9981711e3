# infrastructure/logging/log_setup.py
import sys

from loguru import logger


def setup_console_logging(level: str = "INFO") -> None:
    # stdout carries response bodies, logs go to stderr
    logger.remove()
    logger.add(lambda msg: print(msg, end="", file=sys.stderr), level=level, format="{message}")

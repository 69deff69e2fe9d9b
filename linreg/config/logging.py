"""Configuration and setup for logging."""

import sys

from loguru import logger

from linreg.settings import LinregSettings

HUMAN_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(settings: LinregSettings) -> None:
    logger.remove()  # Remove default handler

    if settings.log_json:
        logger.add(
            sys.stderr,
            serialize=True,
            level="DEBUG" if settings.debug else "INFO",
            format="{message}",
            backtrace=True,
            diagnose=settings.debug,  # Include variable values only in debug mode
        )
        return

    logger.add(
        sys.stderr,
        level="DEBUG" if settings.debug else "INFO",
        format=HUMAN_FORMAT,
        backtrace=True,
        diagnose=settings.debug,
    )

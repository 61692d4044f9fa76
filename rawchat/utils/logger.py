"""Logging utilities for the chat codec.

The package disables its own Loguru messages on import, as libraries
should.  Applications that want to see them call :func:`setup_logging`,
which configures console and optional file sinks, bridges the standard
``logging`` module to Loguru and re-enables the ``rawchat`` logger.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.settings import CodecSettings, get_codec_settings


class LoguruHandler(logging.Handler):
    """Handler to forward standard logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Fetch the corresponding Loguru level if it exists
            level = logger.level(record.levelname).name
        except (KeyError, ValueError):
            level = record.levelno

        # Find the caller from where the logging call was made
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: Optional[CodecSettings] = None) -> "loguru.Logger":
    """Configure Loguru logging for applications using the codec.

    Parameters
    ----------
    settings: Optional[CodecSettings]
        Settings to read the level, log file and debug flag from.  When
        ``None`` the cached settings are used.

    Returns
    -------
    loguru.Logger
        The configured Loguru logger instance.
    """
    settings = settings or get_codec_settings()

    # Remove default handler to prevent duplicate logs
    logger.remove()

    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    logger.add(
        sys.stdout,
        level=settings.log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=settings.app_debug,
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            level=settings.log_level,
            format=log_format,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            backtrace=True,
            diagnose=settings.app_debug,
        )

    logging.basicConfig(handlers=[LoguruHandler()], level=logging.WARNING)
    logger.enable("rawchat")

    logger.info("Logging configured successfully")
    logger.debug(f"App environment: {settings.app_env}")
    logger.debug(f"Log level: {settings.log_level}")

    return logger

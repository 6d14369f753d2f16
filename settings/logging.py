"""Logging configuration."""

import logging
import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_FILE_LEVEL, LOG_LEVEL

# stdlib loggers of the HTTP stack, routed into loguru
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    level: str = LOG_LEVEL,
    to_file: bool = True,
    file_level: str = LOG_FILE_LEVEL,
    log_dir: Path = LOG_DIR,
):
    """Configure console and optional file output; capture uvicorn/fastapi logs.

    Levels default to SARGASSUM_LOG_LEVEL (console) and SARGASSUM_LOG_FILE_LEVEL
    (file). Records from uvicorn and fastapi go through the same sinks.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "sargassum_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level=file_level,
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", log_dir)

    for name in SERVER_LOGGERS:
        std = logging.getLogger(name)
        std.handlers = [InterceptHandler()]
        std.setLevel(logging.DEBUG)
        std.propagate = False

    return logger

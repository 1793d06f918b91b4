"""
Logging configuration for EasyMeta.

Uses loguru so drivers, the registry and the introspection reader share one
sink configuration, set up once by the CLI entry point from Settings.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{line} | {message}"


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Route EasyMeta logs to stderr and, optionally, a rotating file.

    Statements themselves go to stdout, so logs never mix with generated SQL.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: File sink path; its parent directory is created
        rotation: When the file sink rolls over, e.g. "10 MB" or "1 day"
        retention: How long rolled-over files are kept, e.g. "7 days"
    """
    logger.remove()
    logger.configure(extra={"name": "easymeta"})

    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )


def get_logger(name: str | None = None) -> "Logger":
    """Logger tagged with a module name, shown in place of loguru's own module field."""
    if name:
        return logger.bind(name=name)
    return logger

"""
Logging setup for docx_report.

Library modules log through ``logging.getLogger(__name__)``; applications
call :func:`setup_logging` once to get rich, colorized console output.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _level_value(level: str) -> int:
    if not isinstance(level, str) or level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def _rich_handler(console: Optional[Console] = None) -> RichHandler:
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", use_rich: bool = True,
                  console: Optional[Console] = None) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
        console: Console to log to (stderr by default)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_level_value(level))
    root_logger.handlers.clear()

    if use_rich:
        root_logger.addHandler(_rich_handler(console))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging initialized at {level} level (rich={use_rich})")

"""
Logging configuration and setup.

Provides console and optional file output for the playbot logger tree,
and routes discord.py's own logger through the same handlers.
"""

import logging
import sys
from pathlib import Path

from playbot.config.settings import Settings

# Loggers configured by setup_logging(); discord.py logs under "discord"
_CONFIGURED_LOGGERS = ("playbot", "discord")


class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color without mutating the shared record."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    level = getattr(logging, settings.log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handlers: list[logging.Handler] = [console_handler]

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    return handlers


def setup_logging(settings: Settings) -> None:
    """
    Configure logging based on settings.

    Args:
        settings: Application settings containing log configuration
    """
    handlers = _build_handlers(settings)

    for name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, settings.log_level))
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        # Don't propagate to root logger
        logger.propagate = False

    root_logger = logging.getLogger("playbot")
    root_logger.info(f"Logging initialized - Level: {settings.log_level}")
    if settings.log_file:
        root_logger.info(f"Logging to file: {settings.log_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if name == "playbot" or name.startswith("playbot."):
        return logging.getLogger(name)
    return logging.getLogger(f"playbot.{name}")

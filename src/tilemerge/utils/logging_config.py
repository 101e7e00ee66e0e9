"""
Logging configuration for TileMerge.

Console output goes to stderr so that stdout only carries the `id:text`
error reports of the command line tool.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_MAX_BYTES = 10 * 1024 * 1024
FILE_BACKUP_COUNT = 5

# Pillow's plugins log every chunk they decode at DEBUG
QUIET_LOGGERS = ("PIL", "PIL.PngImagePlugin", "PIL.Image")


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if color is None:
            return formatted
        return formatted.replace(
            record.levelname, f"{color}{record.levelname}{self.RESET}", 1
        )


class CSVFormatter(logging.Formatter):
    """Semicolon separated records for the rotating log file."""

    def format(self, record: logging.LogRecord) -> str:
        fields = [
            f'"{self.formatTime(record, self.datefmt)}"',
            record.levelname.ljust(8),
            f'"{int(record.relativeCreated)} ms"',
            f'"{record.name}"',
            f'"{record.lineno}"',
            '"{}"'.format(record.getMessage().replace('"', '""')),
        ]
        return ";".join(fields)


def _console_handler(level_name: str, use_colors: bool) -> logging.Handler:
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    return handler


def _file_handler(log_file: str) -> Optional[logging.Handler]:
    """Rotating CSV handler, or None when the log directory is unusable."""
    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=FILE_MAX_BYTES,
            backupCount=FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not setup file logging: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Replace the root logger's handlers with the configured console and file ones.

    Args:
        settings: AppSettings providing the logging switches
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    logging.getLogger("tilemerge").setLevel(logging.DEBUG)

    if settings.console_logging:
        root_logger.addHandler(
            _console_handler(settings.console_log_level, settings.console_use_colors)
        )

    file_handler = None
    if settings.file_logging:
        file_handler = _file_handler(settings.log_file_path)
        if file_handler is not None:
            root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging initialized, console: {settings.console_logging} "
        f"({settings.console_log_level})"
    )
    if file_handler is not None:
        logger.debug(f"File logging: DEBUG at {Path(settings.log_file_path).absolute()}")

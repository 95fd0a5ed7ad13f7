"""Log output for the markdown reader.

Logs go to stderr or to a file, never stdout, since stdout carries the
stdio MCP transport.
"""

import logging
import os
import sys
from datetime import datetime
from typing import TextIO

from mdreader.config_reader import expand_tilde


class ColoredFormatter(logging.Formatter):
    """Compact single-line formatter with per-level ANSI colors."""

    COLORS = {
        'DEBUG': '\033[37m',     # Gray
        'INFO': '\033[34m',      # Blue
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[31m',  # Red
    }
    LEVEL_NAMES = {
        'DEBUG': 'DEBUG',
        'INFO': 'INFO ',
        'WARNING': 'WARN ',
        'ERROR': 'ERROR',
        'CRITICAL': 'CRIT ',
    }
    TIME_COLOR = '\033[37m'
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S.%f')[:-3]
        level = self.LEVEL_NAMES.get(record.levelname, record.levelname)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.RESET)
            message = (
                f"{self.TIME_COLOR}{timestamp}{self.RESET} "
                f"{color}{level}{self.RESET} {record.getMessage()}"
            )
        else:
            message = f"{timestamp} {level} {record.getMessage()}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def _open_log_file(log_file: str) -> TextIO:
    """Open log_file for appending, falling back to stderr on any error."""
    log_path = expand_tilde(log_file)
    log_dir = os.path.dirname(log_path)
    try:
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        return open(log_path, "a", encoding="utf-8")
    except OSError as e:
        print(f"Warning: Could not open log file {log_path}: {e}", file=sys.stderr)
        return sys.stderr


def configure_logging(debug: bool = False, log_file: str = "") -> logging.Logger:
    """Install the single handler on the "mdreader" logger.

    Args:
        debug: Emit DEBUG records (per-request timings, pruned directories).
        log_file: Append to this file instead of stderr. "~" is expanded
            and missing parent directories are created.
    """
    stream = _open_log_file(log_file) if log_file else sys.stderr
    use_colors = hasattr(stream, "isatty") and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(use_colors=use_colors))

    logger = logging.getLogger("mdreader")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger

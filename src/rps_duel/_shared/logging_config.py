# Area: Shared
"""
rps_duel._shared.logging_config — Structured logging setup
==========================================================

Configures dual logging: terminal (colored, stderr) + optional file
(JSON lines). Stdout is left to the game itself.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .._config import LOG_LEVELS

if TYPE_CHECKING:
    from ..errors import ConfigError

# Package logger
logger = logging.getLogger("rps_duel")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file_path: Optional[str] = None,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    level : int or str
        Logging level, as a number or a name such as "INFO".
        Defaults to WARNING so the game screen stays clean.
    log_file_path : str, optional
        Path to a JSON-lines log file. No file is written when None.

    Raises
    ------
    ValueError
        If level is a name outside DEBUG, INFO, WARNING, ERROR, CRITICAL.
    """
    if isinstance(level, str):
        name = level.strip().upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        level = getattr(logging, name)

    pkg_logger = logging.getLogger("rps_duel")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_error(error: "ConfigError") -> None:
    """
    Log a configuration error in the framed format.

    Parameters
    ----------
    error : ConfigError
        The error to report.
    """
    # Print to terminal (bypassing logger for exact formatting)
    print(error.format_error_log(), file=sys.stderr)

    # Also log to file via logger
    logger.error(
        f"Configuration error: {error.__class__.__name__}",
        extra={
            "source": getattr(error, "source", None),
            "error_type": error.__class__.__name__,
        },
    )

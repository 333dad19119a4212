"""Diagnostic sink for cleanup runs.

Every notable event (warnings, errors with context, skip reasons and
run progress) is appended as a timestamped line to a persistent log
file. The file is append-only and has no rotation or size limit.
Warnings are additionally echoed to stderr through Rich.
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from nextclean.core.paths import ensure_parent_dir
from nextclean.utils.formatting import err_console

# Root logger of the package; every module logs through a child of it.
PACKAGE_LOGGER = "nextclean"

# Marker attribute on handlers installed by configure_diagnostics
_HANDLER_MARKER = "_nextclean_diagnostics"


class TimestampFormatter(logging.Formatter):
    """Format records as ``[<ISO-8601 timestamp>] <message>``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).astimezone().isoformat()
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"[{timestamp}] {message}"


def configure_diagnostics(log_path: Path, verbose: bool = False) -> logging.Logger:
    """Install the file and console handlers on the package logger.

    Calling this again replaces the handlers installed by a previous call,
    so a single process never writes each line twice.

    Args:
        log_path: Log file to append to. Parent directories are created.
        verbose: If True, echo debug messages to the console as well.

    Returns:
        The configured package logger.

    Raises:
        RuntimeError: If the log directory cannot be created.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    reset_diagnostics()

    ensure_parent_dir(log_path)
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(TimestampFormatter())
    setattr(file_handler, _HANDLER_MARKER, True)

    console_handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    setattr(console_handler, _HANDLER_MARKER, True)

    package_logger.addHandler(file_handler)
    package_logger.addHandler(console_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return package_logger


def reset_diagnostics() -> None:
    """Remove and close handlers installed by :func:`configure_diagnostics`."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()


def log_error(logger: logging.Logger, error: BaseException, context: str) -> None:
    """Record an error together with the operation it interrupted.

    Args:
        logger: Logger of the calling module.
        error: The caught exception.
        context: Short description of the operation, e.g. "processing file (/x)".
    """
    logger.error("Error occurred (%s): %s", context, error)

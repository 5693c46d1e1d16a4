"""Logging for dfree with Rich console and optional file output."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# stdout carries the table, so diagnostics go to stderr
console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Records flow through the package logger; handlers decide what is shown
logging.getLogger("dfree").setLevel(logging.DEBUG)

_console_level = logging.WARNING

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Optional[Path]:
    """Send dfree log records to a file as well as the console.

    Args:
        log_file: Path to log file; nothing is configured when omitted
        verbose: Enable debug-level logging

    Returns:
        The log file path, or None when file logging is not enabled
    """
    global _file_logging_configured

    if _file_logging_configured or not log_file:
        return None

    target_log_file = Path(log_file).expanduser()
    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    package_logger = logging.getLogger("dfree")
    package_logger.addHandler(file_handler)

    _file_logging_configured = True
    package_logger.debug(f"dfree file logging initialized: {target_log_file}")
    return target_log_file


def set_verbose(verbose: bool) -> None:
    """Switch dfree console output between WARNING and DEBUG."""
    global _console_level

    _console_level = logging.DEBUG if verbose else logging.WARNING
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith("dfree") or not isinstance(logger, logging.Logger):
            continue
        for handler in logger.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(_console_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a Rich stderr handler attached.

    Args:
        name: Logger name (typically __name__)

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(_console_level)
        logger.addHandler(handler)

    return logger

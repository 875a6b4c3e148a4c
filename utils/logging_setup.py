"""
Root logger configuration for scripts and local play.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here by whichever entry point is running.
"""

import logging
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _configure_root(level: int, *handlers: logging.Handler, format_string: Optional[str] = None) -> None:
    """Replace every root handler with the given ones, sharing one formatter."""
    root = logging.getLogger()
    root.setLevel(level)

    # Calling setup twice must not duplicate output
    for old in list(root.handlers):
        root.removeHandler(old)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)


def setup_console_logging(level: int = logging.INFO, format_string: Optional[str] = None) -> None:
    """Send log records at or above level to stderr."""
    _configure_root(level, logging.StreamHandler(), format_string=format_string)


def setup_logging(
    log_dir: Path,
    run_name: str,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> Path:
    """
    Log to stderr and to ``<log_dir>/<run_name>.log``.

    The directory is created if needed and an existing file of the same name
    is overwritten.

    Args:
        log_dir: Directory for the log file
        run_name: File name without the .log suffix
        level: Minimum level for both handlers
        format_string: Record format; DEFAULT_FORMAT when omitted

    Returns:
        Path of the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{run_name}.log"
    _configure_root(
        level,
        logging.FileHandler(log_path, mode='w', encoding='utf-8'),
        logging.StreamHandler(),
        format_string=format_string,
    )
    return log_path

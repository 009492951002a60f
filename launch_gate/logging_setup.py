from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILE_NAME = "launch-gate.log"

# Loggers that report every store write; only shown with --verbose
CHATTY_LOGGERS = ("settings",)


class _LaunchGateHandler:
    """Marks handlers installed here so a second setup call can replace them."""


class _ConsoleHandler(_LaunchGateHandler, logging.StreamHandler):
    pass


class _FileHandler(_LaunchGateHandler, RotatingFileHandler):
    pass


def setup_logging(config: AppConfig, verbose: bool = False) -> Optional[Path]:
    """Route launcher logs to the console and, when possible, a rotating file.

    Safe to call more than once: handlers from an earlier call are closed and
    replaced, handlers installed by anyone else are left alone.

    Returns:
        The log file path, or None when only console logging is active
    """
    level = logging.DEBUG if verbose else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if isinstance(handler, _LaunchGateHandler):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = _ConsoleHandler()
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    log_file = config.logs_dir / LOG_FILE_NAME
    config.ensure_data_dirs()
    try:
        file_handler = _FileHandler(str(log_file), maxBytes=2_000_000, backupCount=3)
    except OSError as exc:
        logging.getLogger(__name__).warning(f"Cannot write {log_file} ({exc}); logging to console only")
        return None

    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    logging.getLogger(__name__).debug(f"Logging to {log_file}")
    return log_file

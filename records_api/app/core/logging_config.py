"""
Logging set‑up for the Records API.

Every module logs through ``logging.getLogger(__name__)``, so all
service loggers live under the ``records_api`` package logger.
``setup_logging`` applies the configured level to that logger on every
call, even when the host (uvicorn, pytest) has already installed root
handlers.  A console handler is only added to the root logger when
nobody else has configured one, and the optional log file is attached
to the package logger once per path.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "records_api"

FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == str(path)
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``records_api`` logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the service's log lines.  If
        omitted or empty, no file handler is added.
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(FORMATTER)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(app_logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(FORMATTER)
            app_logger.addHandler(file_handler)

    return app_logger

"""
Logging configuration for the service.

The level name comes from ``settings.log_level`` and is resolved once
by ``resolve_log_level``; both the root logger and Uvicorn are given
the resolved number, so any alias the ``logging`` module knows
(``WARN``, ``FATAL``) works and unknown names mean ``INFO``.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(name: str) -> int:
    """Map a level name (any case) to its numeric value, default INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console and optional file handlers to the root logger.

    Does nothing if the root logger already has handlers, e.g. when
    both ``run.py`` and ``create_app`` call it in one process.

    Parameters
    ----------
    level : str
        Level name, see ``resolve_log_level``.
    logfile : Optional[str]
        Also write records to this file (``LOG_FILE`` setting).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_log_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

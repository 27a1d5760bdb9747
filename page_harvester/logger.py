# === FILE: page_harvester/logger.py ===
"""Logging for **PageHarvester**.

Every module logs through a child of the ``PageHarvester`` logger::

    from page_harvester.logger import get_logger
    log = get_logger("fetcher")        # -> PageHarvester.fetcher

The root project logger writes to stdout and, when asked, to a rotating file.
The CLI re-runs :func:`init_logging` with the user's ``--log-*`` options; a
crawl also produces a lot of ``aiohttp.access``/``asyncio`` chatter, which is
kept at the same threshold as the project logger.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

LOGGER_NAME: Final[str] = "PageHarvester"
_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# 5 MiB x 3 backups
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3

_NOISY_LOGGERS: Final[tuple[str, ...]] = ("aiohttp.access", "asyncio")

_LevelT = Union[int, str]


def _resolve_level(level: _LevelT) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _make_handler(fmt: str, log_file: Optional[Path] = None) -> logging.Handler:
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler(sys.stdout)
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the ``PageHarvester`` logger.

    Parameters
    ----------
    level
        Numeric or textual level (``"debug"`` and ``"DEBUG"`` both work).
    log_file
        Rotating logfile in addition to stdout; *None* → stdout only.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – close and drop the current handlers first.
    """
    numeric = _resolve_level(level)
    project = logging.getLogger(LOGGER_NAME)
    project.setLevel(numeric)

    if replace_handlers:
        for handler in list(project.handlers):
            project.removeHandler(handler)
            handler.close()

    project.addHandler(_make_handler(log_format))
    if log_file is not None:
        project.addHandler(_make_handler(log_format, Path(log_file)))
    project.propagate = False

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))
    return project


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Console logging by default; used at import time and by the CLI."""
    return configure(level=level, log_file=log_file, log_format=log_format)


def get_logger(suffix: str | None = None) -> logging.Logger:
    """``PageHarvester`` itself, or its ``PageHarvester.<suffix>`` child."""
    return logging.getLogger(f"{LOGGER_NAME}.{suffix}" if suffix else LOGGER_NAME)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "LOGGER_NAME"]

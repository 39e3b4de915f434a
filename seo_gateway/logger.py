"""Logging setup for seo_gateway.

One project logger, importable everywhere::

    from seo_gateway.logger import logger

Serverless runtimes collect stdout and pass no CLI flags, so the import-time
instance logs to the console at ``SEO_GATEWAY_LOG_LEVEL`` (default ``INFO``).
The CLI calls :func:`init_logging` again with ``--log-level``/``--log-file``/
``--log-format``.
"""
from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

LOG_LEVEL_ENV: Final[str] = "SEO_GATEWAY_LOG_LEVEL"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LevelT = Union[int, str]

_log = logging.getLogger("SeoGateway")


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the project logger.

    *log_file* adds a rotating file (5 MB x 3) next to stdout; with
    *replace_handlers* existing handlers are closed and dropped first.
    """
    _log.setLevel(level)
    if replace_handlers:
        for handler in list(_log.handlers):
            _log.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        _log.addHandler(handler)

    _log.propagate = False
    return _log


def init_logging(
    level: _LevelT | None = None,
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Console logging; *level* falls back to ``$SEO_GATEWAY_LOG_LEVEL`` or INFO."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        # unknown names would make setLevel raise at import time
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOG_LEVEL_ENV", "DEFAULT_FORMAT"]

"""Logging for ``statement_ingest``.

Pipeline modules log through ``get_logger("statement_ingest.<module>")`` and
stay silent until something opts in: the package logger carries only a
``NullHandler`` until :func:`configure_logging` is called. The CLI calls it
once per process after loading ``.env``; embedding applications may call it
themselves or route the ``statement_ingest`` logger into their own handlers.

The level comes from the ``level`` argument, else from
``STATEMENT_INGEST_LOG_LEVEL``, else INFO. At DEBUG the pipeline reports its
delimiter scores, the chosen header row and how many rows it dropped.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "statement_ingest"
_LEVEL_ENV_VAR = "STATEMENT_INGEST_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(_LEVEL_ENV_VAR) or logging.INFO
    if isinstance(level, int):
        return level
    # "debug", "DEBUG" and "10" are all accepted; anything else means INFO.
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelNamesMapping().get(name)
    return numeric if numeric is not None else logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send ``statement_ingest`` log records to ``stream`` (default stderr).

    Only the first call in a process takes effect; use :func:`reset_logging`
    to reconfigure. ``level`` accepts an ``int`` or a level name and falls
    back to ``STATEMENT_INGEST_LOG_LEVEL``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in [h for h in logger.handlers if isinstance(h, logging.NullHandler)]:
        logger.removeHandler(h)

    resolved = _parse_level(level)
    # sys.stderr is looked up per call so test runners that swap it are honored.
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True


def reset_logging() -> None:
    """Detach every handler from the package logger and allow reconfiguration."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``; unconfigured, the package stays quiet."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]

"""Centralized logging configuration for SpendLog.

``configure_logging(...)`` attaches a single ``StreamHandler`` to the package
root logger (``"spendlog"``) and is meant to be called once by the app at
startup. ``get_logger(name)`` hands out loggers and keeps a ``NullHandler`` on
the package root until logging has been configured.

Library modules never attach their own handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PKG_LOGGER_NAME = "spendlog"
_CONFIGURED = False


def _level_from_name(name: str) -> int | None:
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        numeric = _level_from_name(level)
        if numeric is not None:
            return numeric
    env_val = os.getenv("SPENDLOG_LOG_LEVEL")
    if env_val:
        numeric = _level_from_name(env_val)
        if numeric is not None:
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string. When ``None`` the
        ``SPENDLOG_LOG_LEVEL`` environment variable is used, falling back to
        ``logging.INFO``.
    fmt:
        Optional format string, defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        Output stream for the handler (``sys.stderr`` by default).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(PKG_LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the package root, silent until configured."""

    pkg_logger = logging.getLogger(PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    if name != PKG_LOGGER_NAME and not name.startswith(f"{PKG_LOGGER_NAME}."):
        name = f"{PKG_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

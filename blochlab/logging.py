"""Logging utilities for blochlab.

Every module obtains its logger through :func:`get_logger` so that all
simulator output shares one handler configuration under the ``blochlab``
namespace. :func:`configure_logging` changes that configuration for loggers
that already exist and for those created later.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_PACKAGE = "blochlab"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level: int = logging.WARNING
_format: str = _DEFAULT_FORMAT
_stream: Optional[IO[str]] = None  # None means sys.stderr at handler creation

_loggers: dict[str, logging.Logger] = {}
_handlers: dict[str, logging.Handler] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualified(name: Optional[str]) -> str:
    if name is None or name == _PACKAGE:
        return _PACKAGE
    if name.startswith(_PACKAGE + "."):
        return name
    return f"{_PACKAGE}.{name}"


def _make_handler() -> logging.Handler:
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))
    return handler


def _install_handler(logger: logging.Logger) -> None:
    old = _handlers.get(logger.name)
    if old is not None:
        logger.removeHandler(old)
    handler = _make_handler()
    logger.addHandler(handler)
    _handlers[logger.name] = handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. The name is
    typically ``__name__`` of the calling module.

    Args:
        name: Logger name. If None, returns the package logger ``blochlab``.

    Returns:
        Configured logger instance.

    Example:
        >>> from blochlab.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("applying H to qubit 0")
    """
    logger_name = _qualified(name)

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    logger.setLevel(_level)
    logger.propagate = False
    _install_handler(logger)

    _loggers[logger_name] = logger
    return logger


def package_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    """Return the handler blochlab installed on ``logger``, if any."""
    return _handlers.get(logger.name)


def set_log_level(level: int | str) -> None:
    """Set the logging level for all blochlab loggers.

    Args:
        level: Logging level (``logging.DEBUG`` ...) or its name
            (``"DEBUG"``, ``"INFO"``, ...).
    """
    global _level
    _level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_level)
        handler = _handlers.get(logger.name)
        if handler is not None:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Reconfigure level, format and output stream of every blochlab logger.

    Intended to be called once at application startup. Handlers attached by
    other code (for example a test harness) are left in place.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default
            ``[LEVEL] name: message`` layout.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _level, _format, _stream
    _level = _coerce_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream

    for logger in _loggers.values():
        logger.setLevel(_level)
        _install_handler(logger)


__all__ = ["get_logger", "package_handler", "set_log_level", "configure_logging"]

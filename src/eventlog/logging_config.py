# src/eventlog/logging_config.py
"""
Logging setup for the eventlog library's own diagnostics.

The library logs through ``logging.getLogger(__name__)`` in each module and
never configures handlers on import. Applications that want to see those
records (or the text echoed through :class:`~eventlog.sinks.LoggingSink`,
which uses the ``eventlog.echo`` logger) can call :func:`configure_logging`.

Usage:
    from eventlog.logging_config import configure_logging, set_log_level

    configure_logging(config={"level": "DEBUG"})
    set_log_level("WARNING")
"""

import logging
import sys
from typing import Any, Optional, TextIO

LIBRARY_LOGGER_NAME = "eventlog"

DEFAULT_LOGGING_CONFIG: dict[str, Any] = {
    "level": "WARNING",
    "format": "%(levelname)s - %(name)s - %(message)s",
    "propagate": True,
}

# Handler installed by configure_logging, if any
_handler: Optional[logging.Handler] = None


def _resolve_level(level: str | int, fallback: int = logging.WARNING) -> int:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    return level if isinstance(level, int) else fallback


def configure_logging(
    config: dict[str, Any] | None = None,
    stream: Optional[TextIO] = None,
    force_reconfigure: bool = False,
) -> logging.Logger:
    """
    Attach a console handler to the ``eventlog`` logger.

    Calling this more than once is a no-op unless ``force_reconfigure`` is
    set, in which case the previous handler is replaced.

    Args:
        config: Overrides for ``DEFAULT_LOGGING_CONFIG`` (``level``,
            ``format``, ``propagate``).
        stream: Stream for the handler. Defaults to ``sys.stderr``.
        force_reconfigure: Replace an existing handler.

    Returns:
        The configured ``eventlog`` logger.
    """
    global _handler

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if _handler is not None and not force_reconfigure:
        return library_logger

    log_config = {**DEFAULT_LOGGING_CONFIG, **(config or {})}

    if _handler is not None:
        library_logger.removeHandler(_handler)
        _handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(log_config["format"]))
    library_logger.addHandler(handler)
    library_logger.setLevel(_resolve_level(log_config["level"]))
    library_logger.propagate = bool(log_config["propagate"])
    _handler = handler

    library_logger.debug("eventlog logging configured")
    return library_logger


def set_log_level(level: str | int) -> None:
    """Change the ``eventlog`` logger's level at runtime."""
    logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(_resolve_level(level))


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging` and restore defaults."""
    global _handler

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
        _handler.close()
        _handler = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True

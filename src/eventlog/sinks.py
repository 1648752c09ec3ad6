# src/eventlog/sinks.py
"""
Echo sinks.

A sink receives the formatted text of echoed events. It exposes one method
per level (``debug``, ``info``, ``warn``, ``error``), each taking a single
string. How the text is rendered or where it goes is entirely up to the sink;
the event log only decides whether and what to send.

Built-in sinks:
    - LoggingSink: forwards to a stdlib ``logging`` logger
    - StreamSink: writes lines to text streams (stdout/stderr by default)
    - InMemorySink: keeps ``(level, text)`` pairs for tests and inspection
    - CallbackSink: calls a function with ``(level, text)``

Usage:
    >>> from eventlog import EventLog
    >>> from eventlog.sinks import InMemorySink
    >>>
    >>> sink = InMemorySink()
    >>> log = EventLog(echo_level="warn", sink=sink)
    >>> _ = log.warn("low disk space").info("ignored")
    >>> sink.lines
    ['Warn: low disk space']
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional, TextIO

from .levels import LogLevel

# Logger used by LoggingSink when none is given
ECHO_LOGGER_NAME = "eventlog.echo"


# =============================================================================
# SINK PROTOCOL
# =============================================================================


class EchoSink(ABC):
    """
    Abstract base class for echo sinks.

    Each method receives one fully formatted string.
    """

    @abstractmethod
    def debug(self, text: str) -> None:
        ...

    @abstractmethod
    def info(self, text: str) -> None:
        ...

    @abstractmethod
    def warn(self, text: str) -> None:
        ...

    @abstractmethod
    def error(self, text: str) -> None:
        ...

    @property
    def name(self) -> str:
        """Return the sink name for identification."""
        return self.__class__.__name__


_HANDLERS: Mapping[LogLevel, Callable[[EchoSink, str], None]] = {
    LogLevel.DEBUG: lambda sink, text: sink.debug(text),
    LogLevel.INFO: lambda sink, text: sink.info(text),
    LogLevel.WARN: lambda sink, text: sink.warn(text),
    LogLevel.ERROR: lambda sink, text: sink.error(text),
}


def dispatch_echo(sink: EchoSink, level: LogLevel, text: str) -> None:
    """Send ``text`` to the handler of ``sink`` that matches ``level``."""
    _HANDLERS[level](sink, text)


# =============================================================================
# SINK IMPLEMENTATIONS
# =============================================================================


class LoggingSink(EchoSink):
    """
    Forwards echoed text to a stdlib logger.

    ``warn`` maps to ``Logger.warning``. Rendering, filtering and handlers are
    left to the application's logging configuration.
    """

    def __init__(self, target: Optional[logging.Logger] = None) -> None:
        """
        Initialize the logging sink.

        Args:
            target: Logger to write to. Defaults to ``eventlog.echo``.
        """
        self.target = target or logging.getLogger(ECHO_LOGGER_NAME)

    def debug(self, text: str) -> None:
        self.target.debug(text)

    def info(self, text: str) -> None:
        self.target.info(text)

    def warn(self, text: str) -> None:
        self.target.warning(text)

    def error(self, text: str) -> None:
        self.target.error(text)

    @property
    def name(self) -> str:
        return f"LoggingSink({self.target.name})"


class StreamSink(EchoSink):
    """
    Writes one line per echoed event to a text stream.

    Without explicit streams, debug/info go to ``sys.stdout`` and warn/error
    to ``sys.stderr``, looked up at write time.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the stream sink.

        Args:
            stream: Stream for debug/info text (and warn/error if
                ``error_stream`` is not given).
            error_stream: Stream for warn/error text.
        """
        self._stream = stream
        self._error_stream = error_stream if error_stream is not None else stream

    def _write(self, stream: TextIO, text: str) -> None:
        stream.write(text + "\n")
        stream.flush()

    def debug(self, text: str) -> None:
        self._write(self._stream or sys.stdout, text)

    def info(self, text: str) -> None:
        self._write(self._stream or sys.stdout, text)

    def warn(self, text: str) -> None:
        self._write(self._error_stream or sys.stderr, text)

    def error(self, text: str) -> None:
        self._write(self._error_stream or sys.stderr, text)


class InMemorySink(EchoSink):
    """
    Stores echoed text in memory for testing and debugging.

    Records are ``(level, text)`` pairs in arrival order.
    """

    def __init__(self) -> None:
        self._records: list[tuple[LogLevel, str]] = []

    def debug(self, text: str) -> None:
        self._records.append((LogLevel.DEBUG, text))

    def info(self, text: str) -> None:
        self._records.append((LogLevel.INFO, text))

    def warn(self, text: str) -> None:
        self._records.append((LogLevel.WARN, text))

    def error(self, text: str) -> None:
        self._records.append((LogLevel.ERROR, text))

    @property
    def records(self) -> list[tuple[LogLevel, str]]:
        """Get all stored ``(level, text)`` pairs."""
        return list(self._records)

    @property
    def lines(self) -> list[str]:
        """Get the stored text only."""
        return [text for _, text in self._records]

    def lines_for(self, level: LogLevel | str) -> list[str]:
        """Get the stored text received by one level's handler."""
        level = LogLevel.coerce(level)
        return [text for record_level, text in self._records if record_level == level]

    def clear(self) -> None:
        """Drop all stored records."""
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)


class CallbackSink(EchoSink):
    """
    Calls a function for every echoed event.

    Useful for bridging to UIs or other reporting layers without writing a
    sink class.
    """

    def __init__(self, callback: Callable[[LogLevel, str], None]) -> None:
        """
        Initialize callback sink.

        Args:
            callback: Called as ``callback(level, text)``.
        """
        self.callback = callback

    def debug(self, text: str) -> None:
        self.callback(LogLevel.DEBUG, text)

    def info(self, text: str) -> None:
        self.callback(LogLevel.INFO, text)

    def warn(self, text: str) -> None:
        self.callback(LogLevel.WARN, text)

    def error(self, text: str) -> None:
        self.callback(LogLevel.ERROR, text)


__all__ = [
    "ECHO_LOGGER_NAME",
    "EchoSink",
    "LoggingSink",
    "StreamSink",
    "InMemorySink",
    "CallbackSink",
    "dispatch_echo",
]

# src/eventlog/event_log.py
"""
In-process structured event log.

An ``EventLog`` collects leveled events (debug/info/warn/error) for a single
logical operation - a request, a build step, a CLI invocation - so the
outcome can be inspected programmatically instead of only printed.

Architecture:
    - Events are kept in one ordered list; insertion order is the source of
      truth and every per-level view is derived from it.
    - Reads are copy-on-read: ``initial_data`` is merged into each event's
      ``data`` on the returned copies, never into the stored events.
    - Payloads are copied on the way in and on ``get_events``; message-only
      reads never touch them.
    - Echoing is decided at add time by ``meets_threshold`` and sent to an
      injected :class:`~eventlog.sinks.EchoSink`.

Thread Safety:
    None. One owner per instance; use one log per concurrent task and
    ``EventLog.merge`` the results afterwards.

Usage:
    >>> from eventlog import EventLog
    >>> from eventlog.sinks import InMemorySink
    >>>
    >>> sink = InMemorySink()
    >>> log = EventLog(echo_level="warn", initial_data={"step": "compile"}, sink=sink)
    >>> _ = log.info("Starting").warn("Deprecated flag", data={"flag": "-O"})
    >>> sink.lines
    ['Warn: Deprecated flag']
    >>> log.get_events("warn")[0].data
    {'step': 'compile', 'flag': '-O'}
    >>> log.ok, log.highest_level
    (True, <LogLevel.WARN: 'warn'>)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from pydantic import BaseModel, ValidationError

from . import levels
from .config import (
    DEFAULT_SECTION_PATH,
    EventLogOptions,
    load_event_log_options,
    load_event_log_options_from_file,
)
from .exceptions import ConfigError
from .formatting import format_event, format_event_message
from .levels import LOG_LEVELS, OFF, EchoDetail, EchoLevel, LogLevel, coerce_echo_level
from .models import AddEventOptions, Event, EventMessageOptions, FilterEventsParams
from .sinks import EchoSink, LoggingSink, dispatch_echo
from .utils import copy_payload, is_plain_record, omit_none

logger = logging.getLogger(__name__)


class EventLog:
    """
    Ordered, append-only buffer of leveled events.

    Attributes:
        base_indent_level: Added to every event's indent level at add time.
        default_type: Type tag for events added without one.
        echo_level: Default echo threshold (a level or ``"off"``).
        echo_detail: Echo the message only, or the whole event.
        initial_data: Defaults merged into each event's data on read.
        log_level: Reserved; accepted in configuration but not consulted.
        indent_level: Running indent for new events (see :meth:`indented`).
        sink: Destination of echoed text.
    """

    log_levels = LOG_LEVELS

    def __init__(
        self,
        options: Optional[EventLogOptions] = None,
        *,
        sink: Optional[EchoSink] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the event log.

        Args:
            options: Construction options. Defaults to ``EventLogOptions()``.
            sink: Echo destination. Defaults to a ``LoggingSink`` on the
                ``eventlog.echo`` logger.
            **kwargs: ``EventLogOptions`` fields overriding ``options``.

        Raises:
            ConfigError: If ``kwargs`` hold invalid option values.
        """
        if kwargs:
            if "type" in kwargs:
                kwargs["default_type"] = kwargs.pop("type")
            base = _given_fields(options)
            try:
                options = EventLogOptions.model_validate({**base, **kwargs})
            except ValidationError as e:
                raise ConfigError(f"Invalid event log options: {e}") from e
        options = options or EventLogOptions()

        self.base_indent_level: int = options.base_indent_level
        self.default_type: Optional[str] = options.default_type
        self.echo_detail: EchoDetail = options.echo_detail
        self.echo_level: EchoLevel = options.echo_level
        self.initial_data: Any = options.initial_data
        self.log_level: Optional[LogLevel] = options.log_level
        self.indent_level: Optional[int] = None
        self.sink: EchoSink = sink if sink is not None else LoggingSink()

        self._events: list[Event] = []

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def from_config(
        cls,
        config_dict: dict[str, Any] | None = None,
        section_path: str = DEFAULT_SECTION_PATH,
        sink: Optional[EchoSink] = None,
    ) -> EventLog:
        """Build a log from a configuration dictionary section."""
        return cls(load_event_log_options(config_dict, section_path), sink=sink)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        section_path: str = DEFAULT_SECTION_PATH,
        sink: Optional[EchoSink] = None,
    ) -> EventLog:
        """Build a log from a section of a TOML file."""
        return cls(load_event_log_options_from_file(path, section_path), sink=sink)

    @classmethod
    def merge(cls, event_logs: Iterable[EventLog]) -> EventLog:
        """
        Merge multiple logs into a new one.

        The result has default configuration (echo off), so nothing is
        echoed. Events keep the given log order, then their order within
        each log.
        """
        event_logs = list(event_logs)
        merged = cls()
        merged.append(*event_logs)
        logger.debug(f"Merged {len(event_logs)} logs into one with {merged.count()} events")
        return merged

    # -------------------------------------------------------------------------
    # Level rules
    # -------------------------------------------------------------------------

    @staticmethod
    def compare_levels(a: LogLevel | str, b: LogLevel | str) -> int:
        """Positive if ``a`` is more severe than ``b``, negative if less, else 0."""
        return levels.compare_levels(a, b)

    @staticmethod
    def meets_threshold(
        level: Optional[LogLevel | str],
        threshold: Optional[EchoLevel | str],
    ) -> bool:
        """True if ``level`` is at least ``threshold``; never for ``"off"``."""
        return levels.meets_threshold(level, threshold)

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def add_event(
        self,
        level: LogLevel | str,
        message: str,
        options: Optional[AddEventOptions] = None,
        **kwargs: Any,
    ) -> Event:
        """
        Append an event and echo it if its level meets the threshold.

        Args:
            level: Event level.
            message: Event message.
            options: Per-call overrides.
            **kwargs: ``AddEventOptions`` fields (``id``, ``data``,
                ``echo_level``, ``indent_level``, ``event_type``/``type``)
                overriding ``options``.

        Returns:
            The stored event.
        """
        level = LogLevel.coerce(level)
        options = self._resolve_add_options(options, kwargs)

        echo_level = options.echo_level if options.echo_level is not None else self.echo_level
        indent_level = (
            options.indent_level if options.indent_level is not None else self.indent_level
        )
        event_type = options.event_type if options.event_type is not None else self.default_type

        fields: dict[str, Any] = {"level": level, "message": message}
        if indent_level is not None or self.base_indent_level:
            fields["indent_level"] = (indent_level or 0) + self.base_indent_level
        # The stored payload is a private copy; later caller mutations don't reach it
        fields.update(
            omit_none(
                {"id": options.id, "data": copy_payload(options.data), "event_type": event_type}
            )
        )

        event = Event(**fields)
        self._events.append(event)

        if levels.meets_threshold(level, echo_level):
            self._echo(event)

        return event

    def debug(self, message: str, options: Optional[AddEventOptions] = None, **kwargs: Any) -> EventLog:
        self.add_event(LogLevel.DEBUG, message, options, **kwargs)
        return self

    def info(self, message: str, options: Optional[AddEventOptions] = None, **kwargs: Any) -> EventLog:
        self.add_event(LogLevel.INFO, message, options, **kwargs)
        return self

    def warn(self, message: str, options: Optional[AddEventOptions] = None, **kwargs: Any) -> EventLog:
        self.add_event(LogLevel.WARN, message, options, **kwargs)
        return self

    def error(self, message: str, options: Optional[AddEventOptions] = None, **kwargs: Any) -> EventLog:
        self.add_event(LogLevel.ERROR, message, options, **kwargs)
        return self

    @contextmanager
    def indented(self, depth: int = 1) -> Iterator[EventLog]:
        """
        Raise the running indent for events added inside the block.

        Example:
            >>> log = EventLog()
            >>> with log.indented():
            ...     _ = log.info("nested")
            >>> log.get_events()[0].indent_level
            1
        """
        previous = self.indent_level
        self.indent_level = (previous or 0) + depth
        try:
            yield self
        finally:
            self.indent_level = previous

    def append(self, *event_logs: EventLog) -> EventLog:
        """
        Append the events of one or more logs to this one.

        Each event is re-added through :meth:`add_event`, so indentation and
        echoing follow this log's configuration. An event is echoed here only
        if this log raises the echo detail from ``message`` to ``event``, or
        if it was below the source's threshold but meets this log's; events
        the source already echoed are not echoed twice.

        Returns:
            This log, for chaining.
        """
        for event_log in event_logs:
            raises_detail = (
                self.echo_detail == EchoDetail.EVENT
                and event_log.echo_detail == EchoDetail.MESSAGE
            )
            # add_event copies each payload, so the source's views are read uncopied
            events = event_log._view(event_log._events)
            for event in events:
                newly_visible = not levels.meets_threshold(
                    event.level, event_log.echo_level
                ) and levels.meets_threshold(event.level, self.echo_level)
                echo_level = self.echo_level if raises_detail or newly_visible else OFF
                self.add_event(
                    event.level,
                    event.message,
                    AddEventOptions(
                        id=event.id,
                        data=event.data,
                        echo_level=echo_level,
                        indent_level=event.indent_level,
                        event_type=event.event_type,
                    ),
                )
            logger.debug(f"Appended {len(events)} events; log now holds {self.count()}")
        return self

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def get_events(self, level: Optional[LogLevel | str] = None) -> list[Event]:
        """
        Get copies of the stored events, optionally for one level only.

        Each copy's ``data`` is merged with ``initial_data``: missing data
        becomes ``initial_data``; two plain dicts are shallow-merged with the
        event's keys winning; any other combination keeps the event's data.
        """
        return self._view(self._select(level), copy_data=True)

    def get_messages(
        self,
        level: Optional[LogLevel | str] = None,
        options: Optional[EventMessageOptions] = None,
        *,
        omit_level: bool = False,
    ) -> list[str]:
        """Get event messages, prefixed with ``"<Level>: "`` unless omitted."""
        omit_level = omit_level or (options is not None and options.omit_level)
        return [self._render_message(event, omit_level) for event in self._select(level)]

    def filter_events(
        self,
        params: Optional[FilterEventsParams] = None,
        *,
        min_level: Optional[LogLevel | str] = None,
        max_level: Optional[LogLevel | str] = None,
    ) -> list[Event]:
        """Get events whose level lies within the inclusive bounds."""
        bounds = self._resolve_filter(params, min_level, max_level)
        selected = [event for event in self._events if bounds.accepts(event.level)]
        return self._view(selected, copy_data=True)

    def filter_messages(
        self,
        params: Optional[FilterEventsParams] = None,
        options: Optional[EventMessageOptions] = None,
        *,
        min_level: Optional[LogLevel | str] = None,
        max_level: Optional[LogLevel | str] = None,
        omit_level: bool = False,
    ) -> list[str]:
        """Get messages of events whose level lies within the inclusive bounds."""
        omit_level = omit_level or (options is not None and options.omit_level)
        bounds = self._resolve_filter(params, min_level, max_level)
        return [
            self._render_message(event, omit_level)
            for event in self._events
            if bounds.accepts(event.level)
        ]

    def count(self, level: Optional[LogLevel | str] = None) -> int:
        """Count all events, or the events of one level."""
        if level is None:
            return len(self._events)
        level = LogLevel.coerce(level)
        return sum(1 for event in self._events if event.level == level)

    def has(self, level: Optional[LogLevel | str] = None) -> bool:
        """True if there is any event (of ``level``, when given)."""
        return self.count(level) > 0

    @property
    def counts(self) -> dict[LogLevel, int]:
        """Number of events per level."""
        return {level: self.count(level) for level in LOG_LEVELS}

    @property
    def events(self) -> dict[LogLevel, list[Event]]:
        """Events per level, most severe level first."""
        return {level: self.get_events(level) for level in reversed(LOG_LEVELS)}

    @property
    def messages(self) -> dict[LogLevel, list[str]]:
        """Messages (without level prefix) per level, most severe level first."""
        return {
            level: self.get_messages(level, omit_level=True) for level in reversed(LOG_LEVELS)
        }

    @property
    def has_events(self) -> bool:
        return bool(self._events)

    @property
    def highest_level(self) -> Optional[LogLevel]:
        """Most severe level present, or None for an empty log."""
        return max((event.level for event in self._events), key=lambda lvl: lvl.rank, default=None)

    @property
    def ok(self) -> bool:
        """True if no event is at ``error`` severity."""
        highest = self.highest_level
        return highest is None or levels.compare_levels(highest, LogLevel.ERROR) < 0

    @property
    def stats(self) -> dict[str, Any]:
        """Get a summary of the log contents."""
        highest = self.highest_level
        return {
            "total_events": self.count(),
            "counts": {level.value: count for level, count in self.counts.items()},
            "highest_level": highest.value if highest else None,
            "ok": self.ok,
        }

    def to_dicts(self, level: Optional[LogLevel | str] = None) -> list[dict[str, Any]]:
        """Get events as dictionaries holding only their present fields."""
        return [event.to_dict() for event in self.get_events(level)]

    def format_events(
        self,
        level: Optional[LogLevel | str] = None,
        detail: EchoDetail | str = EchoDetail.EVENT,
    ) -> str:
        """Render events one after another, as they would be echoed."""
        formatter = format_event if EchoDetail(detail) == EchoDetail.EVENT else format_event_message
        return "\n".join(formatter(event) for event in self._view(self._select(level)))

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.get_events())

    def __repr__(self) -> str:
        highest = self.highest_level
        return (
            f"EventLog(count={len(self._events)}, "
            f"highest_level={highest.value if highest else None!r}, "
            f"echo_level={getattr(self.echo_level, 'value', self.echo_level)!r})"
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _echo(self, event: Event) -> None:
        if self.echo_detail == EchoDetail.EVENT:
            text = format_event(event)
        else:
            text = format_event_message(event)
        dispatch_echo(self.sink, event.level, text)

    def _select(self, level: Optional[LogLevel | str]) -> list[Event]:
        if level is None:
            return list(self._events)
        level = LogLevel.coerce(level)
        return [event for event in self._events if event.level == level]

    def _view(self, events: list[Event], copy_data: bool = False) -> list[Event]:
        return [self._with_initial_data(event, copy_data) for event in events]

    def _with_initial_data(self, event: Event, copy_data: bool = False) -> Event:
        """
        Return ``event`` as readers see it, with ``initial_data`` merged in.

        Without ``copy_data`` the result may share payload objects with the
        stored event and must not leave the log.
        """
        data = event.data
        initial_data = self.initial_data
        if initial_data is not None:
            if data is None:
                data = initial_data
            elif is_plain_record(data) and is_plain_record(initial_data):
                data = {**initial_data, **data}
        if data is event.data and not copy_data:
            return event
        if copy_data:
            data = copy_payload(data)
        if data is None:
            return event.model_copy()
        return event.model_copy(update={"data": data})

    @staticmethod
    def _render_message(event: Event, omit_level: bool) -> str:
        return event.message if omit_level else format_event_message(event)

    @staticmethod
    def _resolve_add_options(
        options: Optional[AddEventOptions],
        overrides: dict[str, Any],
    ) -> AddEventOptions:
        if not overrides:
            return options or AddEventOptions()
        if "type" in overrides:
            overrides["event_type"] = overrides.pop("type")
        if "echo_level" in overrides:
            overrides["echo_level"] = coerce_echo_level(overrides["echo_level"])
        return AddEventOptions.model_validate({**_given_fields(options), **overrides})

    @staticmethod
    def _resolve_filter(
        params: Optional[FilterEventsParams],
        min_level: Optional[LogLevel | str],
        max_level: Optional[LogLevel | str],
    ) -> FilterEventsParams:
        overrides = {
            name: LogLevel.coerce(bound)
            for name, bound in (("min_level", min_level), ("max_level", max_level))
            if bound is not None
        }
        if not overrides:
            return params or FilterEventsParams()
        return FilterEventsParams.model_validate({**_given_fields(params), **overrides})


def _given_fields(model: Optional[BaseModel]) -> dict[str, Any]:
    """Explicitly set fields of ``model`` by field name, values left unserialized."""
    if model is None:
        return {}
    return {name: getattr(model, name) for name in model.model_fields_set}


__all__ = ["EventLog"]

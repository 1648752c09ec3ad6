# src/eventlog/__init__.py
"""
eventlog - An in-process structured event log.

Collect leveled events (debug/info/warn/error) with optional structured
payloads during one logical operation, then query, filter, format, merge or
echo them.

Components:
    - EventLog: ordered, append-only event buffer with read-side projections
    - Event: immutable event record
    - LogLevel / EchoDetail: level order and echo detail
    - Sinks: LoggingSink, StreamSink, InMemorySink, CallbackSink
    - EventLogOptions: pydantic construction options, loadable from TOML
"""

from importlib.metadata import PackageNotFoundError, version

from .config import EventLogOptions, load_event_log_options, load_event_log_options_from_file
from .event_log import EventLog
from .exceptions import ConfigError, EventLogError, InvalidLevelError
from .formatting import format_event, format_event_message
from .levels import OFF, EchoDetail, EchoLevel, LogLevel, compare_levels, meets_threshold
from .models import AddEventOptions, Event, EventMessageOptions, FilterEventsParams
from .sinks import CallbackSink, EchoSink, InMemorySink, LoggingSink, StreamSink

try:
    __version__ = version("eventlog")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Core
    "EventLog",
    "Event",
    "AddEventOptions",
    "FilterEventsParams",
    "EventMessageOptions",
    # Levels
    "OFF",
    "LogLevel",
    "EchoLevel",
    "EchoDetail",
    "compare_levels",
    "meets_threshold",
    # Formatting
    "format_event",
    "format_event_message",
    # Sinks
    "EchoSink",
    "LoggingSink",
    "StreamSink",
    "InMemorySink",
    "CallbackSink",
    # Configuration
    "EventLogOptions",
    "load_event_log_options",
    "load_event_log_options_from_file",
    # Exceptions
    "EventLogError",
    "InvalidLevelError",
    "ConfigError",
]

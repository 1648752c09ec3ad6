# src/eventlog/config.py
"""
Event Log Configuration Models.

This module provides the Pydantic model behind ``EventLog`` construction
options and helpers to load it from a configuration dict or a TOML file.

Configuration Structure:
    [eventlog]
    base_indent_level = 0
    echo_detail = "message"      # "message" or "event"
    echo_level = "warn"          # debug, info, warn, error or "off"
    type = "build"               # default type tag for new events

    [eventlog.initial_data]
    job = "nightly"

Usage:
    >>> from eventlog.config import EventLogOptions, load_event_log_options
    >>>
    >>> options = load_event_log_options({"eventlog": {"echo_level": "WARN"}})
    >>> options.echo_level
    <LogLevel.WARN: 'warn'>
    >>>
    >>> # Or use defaults
    >>> EventLogOptions().echo_level
    'off'
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .levels import OFF, EchoDetail, EchoLevel, LogLevel, coerce_echo_level

logger = logging.getLogger(__name__)

DEFAULT_SECTION_PATH = "eventlog"


class EventLogOptions(BaseModel):
    """
    Construction options for an ``EventLog``.

    Maps to: [eventlog]
    """

    model_config = ConfigDict(populate_by_name=True)

    base_indent_level: int = Field(
        default=0, ge=0, description="Indent added to every event at add time"
    )
    echo_detail: EchoDetail = Field(
        default=EchoDetail.MESSAGE, description="Echo the message only, or the whole event"
    )
    echo_level: EchoLevel = Field(default=OFF, description="Minimum level to echo, or 'off'")
    initial_data: Any = Field(
        default=None, description="Defaults merged into every event's data on read"
    )
    log_level: Optional[LogLevel] = Field(
        default=None, description="Reserved; accepted but not used"
    )
    default_type: Optional[str] = Field(
        default=None, alias="type", description="Type tag for events added without one"
    )

    @field_validator("echo_detail", mode="before")
    @classmethod
    def validate_echo_detail(cls, v: Any) -> EchoDetail:
        if isinstance(v, str):
            return EchoDetail(v.lower())
        return v

    @field_validator("echo_level", mode="before")
    @classmethod
    def validate_echo_level(cls, v: Any) -> EchoLevel:
        return coerce_echo_level(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Optional[LogLevel]:
        if v is None:
            return None
        return LogLevel.coerce(v)


def load_event_log_options(
    config_dict: dict[str, Any] | None = None,
    section_path: str = DEFAULT_SECTION_PATH,
) -> EventLogOptions:
    """
    Load event log options from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary. If None, returns defaults.
        section_path: Dot-separated path to the event log section. An empty
            string means ``config_dict`` is the section itself.

    Returns:
        EventLogOptions instance.

    Raises:
        ConfigError: If the section exists but holds invalid values.
    """
    if config_dict is None:
        return EventLogOptions()

    section: Any = config_dict
    for part in filter(None, section_path.split(".")):
        if not isinstance(section, dict) or part not in section:
            logger.warning(f"Config path '{section_path}' not found, using defaults")
            return EventLogOptions()
        section = section[part]

    if not isinstance(section, dict):
        logger.warning(f"Config section '{section_path}' is not a dict, using defaults")
        return EventLogOptions()

    try:
        return EventLogOptions.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid event log configuration in '{section_path}': {e}") from e


def load_event_log_options_from_file(
    path: str | Path,
    section_path: str = DEFAULT_SECTION_PATH,
) -> EventLogOptions:
    """
    Load event log options from a TOML file.

    Args:
        path: Path to the TOML file.
        section_path: Dot-separated path to the event log section.

    Returns:
        EventLogOptions instance.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or holds
            invalid values.
    """
    file_path = Path(path).expanduser()
    try:
        with open(file_path, "rb") as f:
            config_dict = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {file_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {file_path}: {e}") from e

    logger.debug(f"Loaded event log configuration from {file_path}")
    return load_event_log_options(config_dict, section_path)


__all__ = [
    "DEFAULT_SECTION_PATH",
    "EventLogOptions",
    "load_event_log_options",
    "load_event_log_options_from_file",
]

# src/eventlog/models.py
"""
Data models for the event log.

``Event`` is the stored record. Its optional fields (``id``, ``data``,
``indent_level``, ``event_type``) are only *present* when they were given at
construction; presence is tracked through pydantic's ``model_fields_set`` so
that serialization and formatting can skip absent fields instead of
rendering ``None``.

The remaining models carry per-call options for :class:`~eventlog.EventLog`
methods.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .levels import EchoLevel, LogLevel, coerce_echo_level


class Event(BaseModel):
    """
    A single leveled log entry.

    Events are immutable once created. Use :meth:`is_set` to tell an absent
    optional field from one that was given.

    Freezing does not reach inside ``data``. :meth:`EventLog.add_event` stores
    a private copy of the payload, so changing the caller's object afterwards
    does not alter the stored event.
    """

    model_config = ConfigDict(frozen=True)

    level: LogLevel
    message: str
    id: Optional[Union[int, str]] = None
    data: Any = None
    indent_level: Optional[int] = Field(default=None, ge=0)
    event_type: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> LogLevel:
        return LogLevel.coerce(v)

    def is_set(self, field_name: str) -> bool:
        """Return True if ``field_name`` was given when the event was built."""
        return field_name in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary holding only the present fields."""
        payload = self.model_dump(exclude_unset=True)
        payload["level"] = self.level.value
        return payload

    def to_json(self) -> str:
        """Convert to a JSON string holding only the present fields."""
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)


class AddEventOptions(BaseModel):
    """Per-call overrides for :meth:`EventLog.add_event`."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[Union[int, str]] = None
    data: Any = None
    echo_level: Optional[EchoLevel] = None
    indent_level: Optional[int] = Field(default=None, ge=0)
    event_type: Optional[str] = Field(default=None, alias="type")

    @field_validator("echo_level", mode="before")
    @classmethod
    def validate_echo_level(cls, v: Any) -> Optional[EchoLevel]:
        return coerce_echo_level(v)


class FilterEventsParams(BaseModel):
    """Inclusive severity bounds; a missing bound is unbounded on that side."""

    min_level: Optional[LogLevel] = None
    max_level: Optional[LogLevel] = None

    @field_validator("min_level", "max_level", mode="before")
    @classmethod
    def validate_bound(cls, v: Any) -> Optional[LogLevel]:
        if v is None:
            return None
        return LogLevel.coerce(v)

    def accepts(self, level: LogLevel) -> bool:
        """Return True if ``level`` falls inside the bounds."""
        if self.min_level is not None and level.rank < self.min_level.rank:
            return False
        if self.max_level is not None and level.rank > self.max_level.rank:
            return False
        return True


class EventMessageOptions(BaseModel):
    """Options for rendering events as message strings."""

    omit_level: bool = False  # don't prepend "<Level>: "


__all__ = [
    "Event",
    "AddEventOptions",
    "FilterEventsParams",
    "EventMessageOptions",
]

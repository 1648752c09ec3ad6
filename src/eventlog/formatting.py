# src/eventlog/formatting.py
"""
Text rendering of events.

Two shapes are produced:

- message format: ``"Warn: disk almost full"``
- event format: the message line followed by one line per present extra
  field (``id``, then ``data``). Plain dict payloads expand key by key, one
  indent unit deeper per nesting level; every other value is rendered as
  compact JSON.

Example (``indent_level=1``, ``id=7``, ``data={"path": "/tmp", "retry": {"count": 2}}``)::

      Warn: disk almost full
        id: 7
        data:
          path: "/tmp"
          retry:
            count: 2
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .models import Event
from .utils import capitalize_first_word, is_plain_record

INDENT_UNIT = "  "


def indent(text: str, indent_level: Optional[int] = 0) -> str:
    """Prefix ``text`` with one indent unit per level."""
    return INDENT_UNIT * (indent_level or 0) + text


def format_event_message(event: Event) -> str:
    """Render ``"<Level>: <message>"``."""
    return f"{capitalize_first_word(event.level.value)}: {event.message}"


def format_event(event: Event) -> str:
    """Render the message line plus the event's id and data."""
    base_level = event.indent_level or 0
    lines = [indent(format_event_message(event), base_level)]
    for key in ("id", "data"):
        value = getattr(event, key)
        if value is None:
            continue
        lines.extend(_format_entry(key, value, base_level))
    return "\n".join(lines)


def _format_entry(key: str, value: Any, indent_level: int) -> list[str]:
    if is_plain_record(value):
        lines = [indent(f"{key}:", indent_level + 1)]
        for child_key, child_value in value.items():
            lines.extend(_format_entry(str(child_key), child_value, indent_level + 1))
        return lines
    return [indent(f"{key}: {_render_value(value)}", indent_level + 1)]


def _render_value(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


__all__ = ["INDENT_UNIT", "indent", "format_event_message", "format_event"]

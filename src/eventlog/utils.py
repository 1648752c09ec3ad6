# src/eventlog/utils.py
"""Small pure helpers shared by the formatting and event log modules."""

from __future__ import annotations

import copy
from typing import Any


def capitalize_first_word(text: str) -> str:
    """Upper-case the first character of ``text``, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def is_plain_record(value: Any) -> bool:
    """
    Return True if ``value`` is a plain key/value record.

    Only exact ``dict`` instances qualify; lists, scalars, dict subclasses and
    arbitrary objects do not.
    """
    return type(value) is dict


def omit_none(values: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``values`` without the keys whose value is None."""
    return {key: value for key, value in values.items() if value is not None}


def copy_payload(value: Any) -> Any:
    """
    Copy an event payload so the copy shares no mutable structure with ``value``.

    Plain dicts and lists are rebuilt element by element; anything else is
    deep-copied. Leaves that cannot be copied (locks, open files, generators)
    are shared as-is, so copying never fails.
    """
    if is_plain_record(value):
        return {key: copy_payload(item) for key, item in value.items()}
    if type(value) is list:
        return [copy_payload(item) for item in value]
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        return value

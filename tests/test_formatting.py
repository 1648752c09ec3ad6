# tests/test_formatting.py
"""Tests for event text rendering and the pure helpers behind it."""

import threading

from eventlog.formatting import format_event, format_event_message, indent
from eventlog.models import Event
from eventlog.utils import capitalize_first_word, copy_payload, is_plain_record, omit_none


class TestHelpers:
    """Tests for the small pure helpers."""

    def test_capitalize_first_word(self):
        assert capitalize_first_word("warn") == "Warn"
        assert capitalize_first_word("already Upper") == "Already Upper"
        assert capitalize_first_word("") == ""

    def test_is_plain_record(self):
        """Test only exact dicts count as plain records."""

        class Tagged(dict):
            pass

        assert is_plain_record({"a": 1})
        assert is_plain_record({})
        assert not is_plain_record([1, 2])
        assert not is_plain_record("text")
        assert not is_plain_record(None)
        assert not is_plain_record(Tagged(a=1))

    def test_omit_none(self):
        assert omit_none({"a": 1, "b": None, "c": 0, "d": ""}) == {"a": 1, "c": 0, "d": ""}

    def test_copy_payload(self):
        """Test containers are rebuilt and leaves that refuse copying are shared."""
        lock = threading.Lock()
        original = {"items": [1, {"k": 2}], "lock": lock}

        copied = copy_payload(original)

        assert copied == original
        assert copied is not original
        assert copied["items"] is not original["items"]
        assert copied["items"][1] is not original["items"][1]
        assert copied["lock"] is lock
        assert copy_payload(None) is None

    def test_indent(self):
        assert indent("x") == "x"
        assert indent("x", 2) == "    x"
        assert indent("x", None) == "x"


class TestFormatEventMessage:
    """Tests for the message format."""

    def test_capitalized_level_prefix(self):
        event = Event(level="warn", message="disk almost full")
        assert format_event_message(event) == "Warn: disk almost full"

    def test_ignores_indent_and_data(self):
        event = Event(level="error", message="boom", indent_level=2, data={"a": 1})
        assert format_event_message(event) == "Error: boom"


class TestFormatEvent:
    """Tests for the full event format."""

    def test_message_only(self):
        """Test an event without extras renders a single line."""
        event = Event(level="info", message="started")
        assert format_event(event) == "Info: started"

    def test_id_and_scalar_data(self):
        event = Event(level="debug", message="m", id=7, data="payload")
        assert format_event(event) == 'Debug: m\n  id: 7\n  data: "payload"'

    def test_string_id_is_quoted(self):
        event = Event(level="debug", message="m", id="abc")
        assert format_event(event) == 'Debug: m\n  id: "abc"'

    def test_nested_record_expands(self):
        """Test dict payloads expand key by key with growing indent."""
        event = Event(
            level="warn",
            message="disk almost full",
            indent_level=1,
            id=7,
            data={"path": "/tmp", "retry": {"count": 2}},
        )

        assert format_event(event).split("\n") == [
            "  Warn: disk almost full",
            "    id: 7",
            "    data:",
            '      path: "/tmp"',
            "      retry:",
            "        count: 2",
        ]

    def test_lists_render_as_compact_json(self):
        event = Event(level="info", message="m", data={"items": [1, "two", {"k": True}]})
        assert format_event(event) == 'Info: m\n  data:\n    items: [1,"two",{"k":true}]'

    def test_nested_none_renders_null(self):
        event = Event(level="info", message="m", data={"missing": None})
        assert format_event(event) == "Info: m\n  data:\n    missing: null"

    def test_non_json_values_use_str(self):
        class Marker:
            def __str__(self):
                return "marker"

        event = Event(level="info", message="m", data=[Marker()])
        assert format_event(event) == 'Info: m\n  data: ["marker"]'

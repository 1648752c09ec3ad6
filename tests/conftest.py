# tests/conftest.py
"""Shared fixtures for the eventlog test suite."""

import pytest

from eventlog import EventLog, InMemorySink


@pytest.fixture
def sink():
    """An in-memory sink capturing echoed text."""
    return InMemorySink()


@pytest.fixture
def log(sink):
    """An event log with echo off, wired to the in-memory sink."""
    return EventLog(sink=sink)


@pytest.fixture
def populated_log(sink):
    """A log holding one event of each level, in debug-to-error order."""
    event_log = EventLog(sink=sink)
    event_log.debug("d1").info("i1").warn("w1").error("e1")
    return event_log

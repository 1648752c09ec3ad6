# tests/test_levels.py
"""Tests for log levels, level comparison and echo thresholds."""

import pytest

from eventlog.exceptions import InvalidLevelError
from eventlog.levels import (
    LOG_LEVELS,
    OFF,
    EchoDetail,
    LogLevel,
    coerce_echo_level,
    compare_levels,
    meets_threshold,
)

# =============================================================================
# LOG LEVEL TESTS
# =============================================================================


class TestLogLevel:
    """Tests for the LogLevel enum."""

    def test_values(self):
        """Test enum values."""
        assert LogLevel.DEBUG.value == "debug"
        assert LogLevel.INFO.value == "info"
        assert LogLevel.WARN.value == "warn"
        assert LogLevel.ERROR.value == "error"

    def test_order(self):
        """Test the fixed severity order."""
        assert LOG_LEVELS == (LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR)
        assert [level.rank for level in LOG_LEVELS] == [0, 1, 2, 3]

    def test_coerce(self):
        """Test parsing from members and case-insensitive names."""
        assert LogLevel.coerce(LogLevel.INFO) is LogLevel.INFO
        assert LogLevel.coerce("warn") is LogLevel.WARN
        assert LogLevel.coerce("ERROR") is LogLevel.ERROR

    @pytest.mark.parametrize("value", ["warning", "off", "", None, 3])
    def test_coerce_invalid(self, value):
        """Test unknown values raise InvalidLevelError."""
        with pytest.raises(InvalidLevelError):
            LogLevel.coerce(value)

    def test_comparison_operators(self):
        """Test severity comparison."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.ERROR > LogLevel.WARN
        assert LogLevel.WARN >= LogLevel.WARN
        assert LogLevel.INFO <= LogLevel.WARN
        assert not LogLevel.ERROR < LogLevel.DEBUG

    def test_max_uses_severity(self):
        """Test max() picks the most severe level, not the alphabetical one."""
        assert max([LogLevel.INFO, LogLevel.DEBUG, LogLevel.WARN]) is LogLevel.WARN

    def test_equals_plain_string(self):
        """Test members compare equal to their names."""
        assert LogLevel.WARN == "warn"


class TestEchoDetail:
    """Tests for the EchoDetail enum."""

    def test_values(self):
        assert EchoDetail.MESSAGE.value == "message"
        assert EchoDetail.EVENT.value == "event"


# =============================================================================
# COMPARISON TESTS
# =============================================================================


class TestCompareLevels:
    """Tests for compare_levels."""

    def test_equal(self):
        assert compare_levels("info", "info") == 0

    def test_more_severe_is_positive(self):
        assert compare_levels("error", "debug") > 0
        assert compare_levels(LogLevel.WARN, LogLevel.INFO) > 0

    def test_less_severe_is_negative(self):
        assert compare_levels("debug", "error") < 0

    def test_uses_rank_difference(self):
        assert compare_levels("error", "debug") == 3
        assert compare_levels("info", "warn") == -1


class TestMeetsThreshold:
    """Tests for meets_threshold."""

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_off_never_met(self, level):
        """Test the off threshold is never met."""
        assert meets_threshold(level, OFF) is False
        assert meets_threshold(level, "OFF") is False

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_equal_level_is_met(self, level):
        assert meets_threshold(level, level) is True

    def test_more_severe_threshold_not_met(self):
        assert meets_threshold("info", "warn") is False
        assert meets_threshold("warn", "error") is False

    def test_less_severe_threshold_met(self):
        assert meets_threshold("error", "debug") is True

    def test_missing_values(self):
        """Test a missing level or threshold is never met."""
        assert meets_threshold(None, "debug") is False
        assert meets_threshold("error", None) is False


class TestCoerceEchoLevel:
    """Tests for coerce_echo_level."""

    def test_none_passes_through(self):
        assert coerce_echo_level(None) is None

    def test_off(self):
        assert coerce_echo_level("off") == OFF
        assert coerce_echo_level("Off") == OFF

    def test_level(self):
        assert coerce_echo_level("debug") is LogLevel.DEBUG

    def test_invalid(self):
        with pytest.raises(InvalidLevelError):
            coerce_echo_level("verbose")

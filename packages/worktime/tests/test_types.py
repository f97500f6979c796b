"""Tests for ClockTime and the shared enums."""
import pytest

from worktime import ClockTime, InvalidClockTimeError, ThresholdKind


class TestClockTimeConstruction:
    def test_fields(self):
        t = ClockTime(8, 15)
        assert (t.hour, t.minute) == (8, 15)

    @pytest.mark.parametrize("hour,minute", [(24, 0), (-1, 0), (0, 60), (12, -5)])
    def test_out_of_range_rejected(self, hour, minute):
        with pytest.raises(InvalidClockTimeError):
            ClockTime(hour, minute)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            ClockTime(25, 0)

    def test_frozen(self):
        t = ClockTime(8, 0)
        with pytest.raises(AttributeError):
            t.hour = 9  # type: ignore[misc]

class TestClockTimeParse:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("08:00", ClockTime(8, 0)),
            ("8:05", ClockTime(8, 5)),
            ("23:59", ClockTime(23, 59)),
            (" 00:00 ", ClockTime(0, 0)),
        ],
    )
    def test_valid(self, text, expected):
        assert ClockTime.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "8", "0800", "24:00", "12:60", "ab:cd", "12:5", "123:00"])
    def test_invalid(self, text):
        with pytest.raises(InvalidClockTimeError) as excinfo:
            ClockTime.parse(text)
        assert excinfo.value.value is not None


class TestClockTimeArithmetic:
    def test_minutes_since_midnight(self):
        assert ClockTime(0, 0).minutes == 0
        assert ClockTime(16, 6).minutes == 966

    def test_plus_minutes(self):
        assert ClockTime(8, 0).plus_minutes(486) == ClockTime(16, 6)

    def test_plus_minutes_wraps_past_midnight(self):
        assert ClockTime(20, 0).plus_minutes(570) == ClockTime(5, 30)

    def test_from_minutes_wraps(self):
        assert ClockTime.from_minutes(24 * 60 + 61) == ClockTime(1, 1)
        assert ClockTime.from_minutes(-1) == ClockTime(23, 59)

    def test_ordering(self):
        assert ClockTime(8, 59) < ClockTime(9, 0)
        assert max(ClockTime(17, 30), ClockTime(16, 6)) == ClockTime(17, 30)

    def test_str_is_zero_padded(self):
        assert str(ClockTime(7, 5)) == "07:05"
        assert str(ClockTime(0, 0)) == "00:00"


class TestThresholdKind:
    def test_values(self):
        assert ThresholdKind.MINIMUM.value == "min"
        assert ThresholdKind.MAXIMUM.value == "max"
        assert ThresholdKind("max") is ThresholdKind.MAXIMUM

"""Tests for projecting end times and resolving countdown deadlines."""
from datetime import datetime, timedelta

import pytest

from worktime import (
    ClockTime,
    RolloverPolicy,
    ThresholdKind,
    WorktimeConfig,
    project,
    resolve_deadline,
)
from worktime.projector import offset_for, shift_begin

MIN = ThresholdKind.MINIMUM
MAX = ThresholdKind.MAXIMUM


class TestProject:
    def test_eight_oclock(self):
        p = project(ClockTime(8, 0))
        assert str(p.min_end) == "16:06"
        assert str(p.max_end) == "17:30"
        assert p.start == ClockTime(8, 0)

    @pytest.mark.parametrize("minutes", range(0, 24 * 60, 37))
    def test_fixed_offsets_for_all_starts(self, minutes):
        start = ClockTime.from_minutes(minutes)
        p = project(start)
        assert p.min_end.minutes == (minutes + 486) % (24 * 60)
        assert p.max_end.minutes == (minutes + 570) % (24 * 60)

    def test_wraps_past_midnight(self):
        p = project(ClockTime(22, 0))
        assert p.min_end == ClockTime(6, 6)
        assert p.max_end == ClockTime(7, 30)

    def test_for_kind(self):
        p = project(ClockTime(8, 0))
        assert p.for_kind(MIN) == ClockTime(16, 6)
        assert p.for_kind(MAX) == ClockTime(17, 30)

    def test_custom_config(self):
        cfg = WorktimeConfig(min_work_minutes=420, max_work_minutes=600, break_minutes=45)
        p = project(ClockTime(7, 0), cfg)
        assert p.min_end == ClockTime(14, 45)
        assert p.max_end == ClockTime(17, 45)

    def test_offset_for(self):
        cfg = WorktimeConfig()
        assert offset_for(MIN, cfg) == 486
        assert offset_for(MAX, cfg) == 570


class TestResolveDeadlineAnchored:
    cfg = WorktimeConfig()

    def test_same_day_shift(self):
        now = datetime(2024, 5, 6, 17, 29, 30)
        deadline = resolve_deadline(ClockTime(8, 0), MAX, now, self.cfg)
        assert deadline == datetime(2024, 5, 6, 17, 30)

    def test_already_passed_stays_today(self):
        now = datetime(2024, 5, 6, 18, 0)
        deadline = resolve_deadline(ClockTime(8, 0), MAX, now, self.cfg)
        assert deadline == datetime(2024, 5, 6, 17, 30)

    def test_night_shift_ends_tomorrow(self):
        now = datetime(2024, 5, 6, 22, 30)
        deadline = resolve_deadline(ClockTime(22, 0), MIN, now, self.cfg)
        assert deadline == datetime(2024, 5, 7, 6, 6)

    def test_planning_night_shift_before_it_starts(self):
        now = datetime(2024, 5, 6, 20, 0)
        deadline = resolve_deadline(ClockTime(22, 0), MAX, now, self.cfg)
        assert deadline == datetime(2024, 5, 7, 7, 30)

    def test_after_midnight_tail_of_yesterdays_shift(self):
        now = datetime(2024, 5, 7, 1, 15)
        deadline = resolve_deadline(ClockTime(22, 0), MIN, now, self.cfg)
        assert deadline == datetime(2024, 5, 7, 6, 6)

    def test_future_start_same_day(self):
        now = datetime(2024, 5, 6, 7, 0)
        deadline = resolve_deadline(ClockTime(8, 0), MIN, now, self.cfg)
        assert deadline == datetime(2024, 5, 6, 16, 6)

    def test_thresholds_share_one_anchor_day(self):
        """Only the maximum end crosses midnight; both belong to yesterday's shift."""
        now = datetime(2024, 5, 7, 0, 10)
        dmin = resolve_deadline(ClockTime(15, 0), MIN, now, self.cfg)
        dmax = resolve_deadline(ClockTime(15, 0), MAX, now, self.cfg)
        assert dmin == datetime(2024, 5, 6, 23, 6)
        assert dmax == datetime(2024, 5, 7, 0, 30)
        assert dmin <= dmax

    @pytest.mark.parametrize("minute_of_day", range(0, 24 * 60, 17))
    def test_minimum_never_after_maximum(self, minute_of_day):
        now = datetime(2024, 5, 7) + timedelta(minutes=minute_of_day, seconds=30)
        for start_minutes in range(0, 24 * 60, 45):
            start = ClockTime.from_minutes(start_minutes)
            dmin = resolve_deadline(start, MIN, now, self.cfg)
            dmax = resolve_deadline(start, MAX, now, self.cfg)
            assert dmax - dmin == timedelta(minutes=84)


class TestShiftBegin:
    cfg = WorktimeConfig()

    def test_started_today(self):
        now = datetime(2024, 5, 6, 9, 0)
        assert shift_begin(ClockTime(8, 0), now, self.cfg) == datetime(2024, 5, 6, 8, 0)

    def test_later_today(self):
        now = datetime(2024, 5, 6, 7, 0)
        assert shift_begin(ClockTime(8, 0), now, self.cfg) == datetime(2024, 5, 6, 8, 0)

    def test_inside_yesterdays_shift(self):
        now = datetime(2024, 5, 7, 0, 10)
        assert shift_begin(ClockTime(15, 0), now, self.cfg) == datetime(2024, 5, 6, 15, 0)

    def test_yesterdays_shift_over(self):
        now = datetime(2024, 5, 7, 0, 31)
        assert shift_begin(ClockTime(15, 0), now, self.cfg) == datetime(2024, 5, 7, 15, 0)


class TestResolveDeadlineSameDay:
    cfg = WorktimeConfig(rollover=RolloverPolicy.SAME_DAY)

    def test_target_on_todays_date(self):
        now = datetime(2024, 5, 6, 9, 0, 12)
        deadline = resolve_deadline(ClockTime(8, 0), MIN, now, self.cfg)
        assert deadline == datetime(2024, 5, 6, 16, 6)

    def test_night_shift_target_is_in_the_past(self):
        now = datetime(2024, 5, 6, 22, 30)
        deadline = resolve_deadline(ClockTime(22, 0), MIN, now, self.cfg)
        assert deadline == datetime(2024, 5, 6, 6, 6)
        assert deadline < now

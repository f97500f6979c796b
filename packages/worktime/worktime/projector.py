"""Time projector - maps a start time to the end time of each threshold."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from worktime.config import WorktimeConfig
from worktime.types import ClockTime, RolloverPolicy, ThresholdKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Projection:
    start: ClockTime
    min_end: ClockTime
    max_end: ClockTime

    def for_kind(self, kind: ThresholdKind) -> ClockTime:
        return self.min_end if kind is ThresholdKind.MINIMUM else self.max_end


def offset_for(kind: ThresholdKind, config: WorktimeConfig) -> int:
    """Minutes from start to end of work for `kind`, break included."""
    return config.threshold(kind).offset_minutes


def project(start: ClockTime, config: WorktimeConfig | None = None) -> Projection:
    """Project both end times for a shift beginning at `start` (mod 24h)."""
    config = config or WorktimeConfig()
    projection = Projection(
        start=start,
        min_end=start.plus_minutes(offset_for(ThresholdKind.MINIMUM, config)),
        max_end=start.plus_minutes(offset_for(ThresholdKind.MAXIMUM, config)),
    )
    logger.debug("projected %s -> min %s, max %s", start, projection.min_end, projection.max_end)
    return projection


def resolve_deadline(
    start: ClockTime,
    kind: ThresholdKind,
    now: datetime,
    config: WorktimeConfig,
) -> datetime:
    """Place the end time of `kind` on the calendar, relative to `now`.

    SAME_DAY puts the target clock time on today's date. ANCHORED starts the
    shift today at `start` and adds the threshold offset, so a shift that
    crosses midnight ends tomorrow. When `now` is in the after-midnight tail
    of a shift begun yesterday, the shift is anchored on yesterday instead.
    """
    offset = offset_for(kind, config)
    if config.rollover is RolloverPolicy.SAME_DAY:
        target = start.plus_minutes(offset)
        return _midnight(now) + timedelta(minutes=target.minutes)
    return shift_begin(start, now, config) + timedelta(minutes=offset)


def shift_begin(start: ClockTime, now: datetime, config: WorktimeConfig) -> datetime:
    """Today at `start`, or yesterday while `now` is still inside that shift.

    Decided once per shift from the longest threshold, so every threshold of
    one shift lands on the same anchor day.
    """
    begin = _midnight(now) + timedelta(minutes=start.minutes)
    if now >= begin:
        return begin
    yesterday = begin - timedelta(days=1)
    longest = max(offset_for(kind, config) for kind in ThresholdKind)
    if now < yesterday + timedelta(minutes=longest):
        return yesterday
    return begin


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)

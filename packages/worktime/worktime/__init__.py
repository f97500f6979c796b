"""worktime - End-of-work projection and countdowns for a working day."""

from worktime.calculator import Calculator
from worktime.clock import ManualClock, SystemClock
from worktime.config import Threshold, WorktimeConfig
from worktime.entry import TimeEntry
from worktime.projector import Projection, project, resolve_deadline, shift_begin
from worktime.registry import CountdownRegistry
from worktime.types import (
    ClockTime,
    Countdown,
    CountdownId,
    InvalidClockTimeError,
    RolloverPolicy,
    ThresholdKind,
)

__all__ = [
    "Calculator",
    "ClockTime",
    "Countdown",
    "CountdownId",
    "CountdownRegistry",
    "InvalidClockTimeError",
    "ManualClock",
    "Projection",
    "RolloverPolicy",
    "SystemClock",
    "Threshold",
    "ThresholdKind",
    "TimeEntry",
    "WorktimeConfig",
    "project",
    "resolve_deadline",
    "shift_begin",
]

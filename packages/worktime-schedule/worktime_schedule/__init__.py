"""worktime-schedule - Timeout and interval primitives for the worktime calculator."""
from __future__ import annotations

from worktime_schedule.components import Interval, Timeout
from worktime_schedule.scheduler import Scheduler, TaskHandle

__all__ = ["Timeout", "Interval", "Scheduler", "TaskHandle"]

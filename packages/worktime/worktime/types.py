"""Shared value types and errors for the worktime calculator."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

CountdownId = int

_MINUTES_PER_DAY = 24 * 60
_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


class InvalidClockTimeError(ValueError):
    """Raised when text or numbers do not form a valid time of day."""

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        super().__init__(message)


class ThresholdKind(Enum):
    MINIMUM = "min"
    MAXIMUM = "max"


class RolloverPolicy(Enum):
    """How a countdown target is placed on the calendar when it starts."""

    ANCHORED = "anchored"
    SAME_DAY = "same_day"


@dataclass(frozen=True, order=True, slots=True)
class ClockTime:
    """Wall-clock time of day with minute precision and no date."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not (0 <= self.hour < 24 and 0 <= self.minute < 60):
            raise InvalidClockTimeError(
                (self.hour, self.minute),
                f"Invalid time of day {self.hour}:{self.minute:02d}",
            )

    @classmethod
    def parse(cls, text: str) -> ClockTime:
        match = _CLOCK_RE.match(text)
        if match is None:
            raise InvalidClockTimeError(text, f"Expected HH:MM, got {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_minutes(cls, minutes: int) -> ClockTime:
        minutes %= _MINUTES_PER_DAY
        return cls(minutes // 60, minutes % 60)

    @property
    def minutes(self) -> int:
        """Minutes since midnight."""
        return self.hour * 60 + self.minute

    def plus_minutes(self, minutes: int) -> ClockTime:
        return ClockTime.from_minutes(self.minutes + minutes)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass
class Countdown:
    id: CountdownId
    kind: ThresholdKind
    target_time: ClockTime
    deadline: datetime
    remaining: int = 0
    finished: bool = False

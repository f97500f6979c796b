"""Calculator configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from worktime.types import RolloverPolicy, ThresholdKind

LANGUAGES = ("de", "en")


@dataclass(frozen=True)
class Threshold:
    """One work-duration policy with its break included."""

    kind: ThresholdKind
    work_minutes: int
    break_minutes: int

    @property
    def offset_minutes(self) -> int:
        return self.work_minutes + self.break_minutes

    @property
    def work_hours(self) -> float:
        return self.work_minutes / 60


@dataclass(frozen=True)
class WorktimeConfig:
    """Immutable configuration for the calculator.

    Attributes:
        min_work_minutes: Work minutes of the minimum threshold (7.6h).
        max_work_minutes: Work minutes of the maximum threshold (9h).
        break_minutes: Break added on top of both thresholds.
        refresh_seconds: Period of the countdown refresh interval.
        transition_seconds: Length of the fade-in after the start time changes.
        rollover: How countdown deadlines are placed across midnight.
        language: UI language for labels ("de" or "en").
    """

    min_work_minutes: int = 456
    max_work_minutes: int = 540
    break_minutes: int = 30
    refresh_seconds: float = 1.0
    transition_seconds: float = 0.5
    rollover: RolloverPolicy = RolloverPolicy.ANCHORED
    language: str = "de"

    def __post_init__(self) -> None:
        if self.min_work_minutes <= 0 or self.max_work_minutes <= 0:
            raise ValueError("work minutes must be positive")
        if self.min_work_minutes > self.max_work_minutes:
            raise ValueError("min_work_minutes must not exceed max_work_minutes")
        if self.break_minutes < 0:
            raise ValueError("break_minutes must not be negative")
        if self.max_work_minutes + self.break_minutes >= 24 * 60:
            raise ValueError("a shift must end within 24 hours of its start")
        if self.refresh_seconds <= 0 or self.transition_seconds <= 0:
            raise ValueError("timer periods must be positive")
        if self.language not in LANGUAGES:
            raise ValueError(f"Unsupported language {self.language!r}, expected one of {LANGUAGES}")

    def threshold(self, kind: ThresholdKind) -> Threshold:
        work = self.min_work_minutes if kind is ThresholdKind.MINIMUM else self.max_work_minutes
        return Threshold(kind=kind, work_minutes=work, break_minutes=self.break_minutes)

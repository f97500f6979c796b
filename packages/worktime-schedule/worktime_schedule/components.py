"""Timeout and Interval components."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timeout:
    """One-shot delay. Fires when remaining reaches 0, then is dropped."""

    name: str
    delay: float
    remaining: float = -1.0

    def __post_init__(self) -> None:
        if self.delay <= 0:
            raise ValueError("delay must be positive")
        if self.remaining < 0:
            self.remaining = self.delay


@dataclass
class Interval:
    """Recurring timer. Fires every `period` seconds until cancelled."""

    name: str
    period: float
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError("period must be positive")

"""TimeEntry - digit buffer behind the start-time field."""
from __future__ import annotations

from worktime.types import ClockTime, InvalidClockTimeError


def _digits_of(value: ClockTime | None) -> str:
    return "" if value is None else f"{value.hour:02d}{value.minute:02d}"


class TimeEntry:
    """Collects up to four digits and turns them into a ClockTime.

    `committed` is the last complete, valid time. While the buffer differs
    from it the entry is `stale` and the calculator still uses `committed`.
    """

    def __init__(self, initial: ClockTime | None = None) -> None:
        self._digits = _digits_of(initial)
        self.committed: ClockTime | None = initial
        self.error: str | None = None

    @property
    def text(self) -> str:
        padded = self._digits.ljust(4, "-")
        return f"{padded[:2]}:{padded[2:]}"

    @property
    def empty(self) -> bool:
        return not self._digits

    @property
    def stale(self) -> bool:
        return self.committed is not None and self._digits != _digits_of(self.committed)

    def type_digit(self, digit: str) -> ClockTime | None:
        """Append a digit. Returns the parsed time once four digits are in."""
        if len(self._digits) == 4:
            self._digits = ""
        self._digits += digit
        self.error = None
        if len(self._digits) < 4:
            return None
        try:
            parsed = ClockTime.parse(self.text)
        except InvalidClockTimeError as exc:
            self.error = str(exc)
            self._digits = ""
            return None
        self.committed = parsed
        return parsed

    def backspace(self) -> None:
        self._digits = self._digits[:-1]
        self.error = None

    def revert(self) -> None:
        """Drop an unfinished edit and show the committed time again."""
        self._digits = _digits_of(self.committed)
        self.error = None

    def clear(self) -> None:
        self._digits = ""
        self.committed = None
        self.error = None
